"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexitrie.lexical import LexicalDatabase
from lexitrie.morphology.base import MorphologyProvider
from lexitrie.morphology.conjugation import past_tense, third_person_singular
from lexitrie.schema import Person, Tense


class FakeMorphology(MorphologyProvider):
    """Table-driven morphology for tests; no nltk data needed."""

    name = "fake"

    LEMMAS = {
        "ran": "run",
        "running": "run",
        "runs": "run",
        "cats": "cat",
        "geese": "goose",
        "sprinted": "sprint",
        "dashed": "dash",
    }
    PARTICIPLES = {"run": "running"}
    STEM_SUFFIXES = ("ing", "ed", "ly", "es", "s")

    def __init__(self):
        self.prepared = 0

    def prepare(self) -> None:
        self.prepared += 1

    def lemma(self, word: str) -> str:
        return self.LEMMAS.get(word, word)

    def conjugate(
        self,
        word: str,
        tense: Tense | str,
        person: Optional[Person | str] = None,
    ) -> str:
        tense = Tense(tense)
        if tense is Tense.PAST:
            return past_tense(word)
        if tense is Tense.PRESENT_PARTICIPLE:
            return self.PARTICIPLES.get(word, word + "ing")
        if person is not None:
            return third_person_singular(word)
        return word

    def pluralize(self, word: str) -> str:
        return word + "s"

    def stem(self, word: str) -> str:
        for suffix in self.STEM_SUFFIXES:
            if word.endswith(suffix) and len(word) - len(suffix) >= 3:
                return word[: -len(suffix)]
        return word


class FakeLexicalDatabase(LexicalDatabase):
    """In-memory synsets keyed by (word, WordNet POS letter)."""

    name = "fake"

    def __init__(
        self,
        synsets: dict[tuple[str, str], list[str]],
        words: Optional[list[str]] = None,
    ):
        self.synsets = synsets
        self.words = words or []
        self.prepared = 0

    def prepare(self) -> None:
        self.prepared += 1

    def pos_tags_for(self, word: str) -> set[str]:
        return {pos for (key, pos) in self.synsets if key == word}

    def synsets_of(self, word: str, pos: str) -> list[str]:
        return list(self.synsets.get((word, pos), []))

    def all_words(self):
        return iter(self.words)


SAMPLE_SYNSETS = {
    ("finally", "r"): ["finally", "final", "in_the_end", "at_last", "eventually"],
    ("stagecoach", "n"): ["stagecoach", "stage", "coach", "diligence"],
    ("colour", "n"): ["colour", "color", "discolor", "hue"],
    ("sprint", "v"): ["sprint", "dash", "run"],
}

SAMPLE_WORDS = [
    "finally", "final", "in the end", "at last", "eventually",
    "stagecoach", "coach", "diligence",
    "colour", "color", "discolor", "hue",
    "run", "ran", "running", "runs",
    "sprint", "sprinted", "dash", "dashed",
    "cat", "cats", "dog", "geese",
]

SAMPLE_FREQUENCIES = {
    "finally": {"rb": 1.0},
    "run": {"vb": 0.5, "nn": 0.3, "vbd": 0.2},
    "sprinted": {"vbd": 0.9, "xx": 0.1},
    "cat": {"nn": 1.0},
    "dog": {"nn": 1.0},
}

SAMPLE_UK_TO_US = {"colour": "color"}


@pytest.fixture
def morphology():
    """Fake morphology provider."""
    return FakeMorphology()


@pytest.fixture
def lexical_db():
    """Fake lexical database over the sample synsets."""
    return FakeLexicalDatabase(dict(SAMPLE_SYNSETS))


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def sample_frequencies():
    return {word: dict(tags) for word, tags in SAMPLE_FREQUENCIES.items()}


@pytest.fixture
def sample_uk_to_us():
    return dict(SAMPLE_UK_TO_US)


@pytest.fixture
def sample_wordlist_content():
    """Sample word list with invalid and repeated lines."""
    return """cat
car
cap
dog
2cool
x
cat
it's
well-known
ice cream
supercalifragilistic
"""


@pytest.fixture
def sample_frequency_content():
    """Sample POS frequency table."""
    return """"run": { vb: 0.41, NN: 0.32, vbp: 0.27 }
cat: { nn: 1.0 }
broken line
dog: { nn: lots }
"cat": { nn: 0.9, nns: 0.1 }
"""


@pytest.fixture
def sample_spelling_content():
    """Sample UK -> US spelling map."""
    return """# British to American
colour color
analyse analyze
lonely
colour colorr
"""


def write_data_dir(directory: Path, words, frequency_lines, spelling_lines) -> None:
    """Write the three source files under their default names."""
    (directory / "UKACD.txt").write_text("\n".join(words) + "\n", encoding="utf-8")
    (directory / "word_pos_frequencies.yml").write_text(
        "\n".join(frequency_lines) + "\n", encoding="utf-8"
    )
    (directory / "uk-us-spelling").write_text(
        "\n".join(spelling_lines) + "\n", encoding="utf-8"
    )


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding the sample lexicon's source files."""
    frequency_lines = [
        f"{word}: {{ " + ", ".join(f"{tag}: {freq}" for tag, freq in tags.items()) + " }"
        for word, tags in SAMPLE_FREQUENCIES.items()
    ]
    spelling_lines = [f"{uk} {us}" for uk, us in SAMPLE_UK_TO_US.items()]
    write_data_dir(tmp_path, SAMPLE_WORDS, frequency_lines, spelling_lines)
    return tmp_path


@pytest.fixture
def make_lexical_db():
    """Factory for fake lexical databases over custom synsets."""
    return FakeLexicalDatabase
