"""English morphology backed by nltk and inflect.

- lemma: nltk WordNetLemmatizer, trying verb, noun, adjective, adverb
- stem: nltk PorterStemmer
- pluralize: inflect plural_noun
- conjugate: rule tables for past, present participle and
  third-person-singular present

Install: pip install nltk inflect
WordNet data: python -m nltk.downloader wordnet
"""

from typing import Optional

from ..normalizer import to_wordnet_form
from ..schema import Person, Tense
from .base import MorphologyProvider
from .conjugation import past_tense, present_participle, third_person_singular


class EnglishMorphology(MorphologyProvider):
    """nltk/inflect English morphology."""

    name = "english"

    # Order in which the lemmatizer tries parts of speech
    _LEMMA_POS_ORDER = ("v", "n", "a", "r")

    def __init__(self):
        self._lemmatizer = None
        self._stemmer = None
        self._engine = None

    def _get_lemmatizer(self):
        if self._lemmatizer is None:
            try:
                from nltk.stem import WordNetLemmatizer
            except ImportError as e:
                raise ImportError(
                    "nltk required. Install: pip install nltk"
                ) from e
            self._lemmatizer = WordNetLemmatizer()
        return self._lemmatizer

    def _get_stemmer(self):
        if self._stemmer is None:
            try:
                from nltk.stem import PorterStemmer
            except ImportError as e:
                raise ImportError(
                    "nltk required. Install: pip install nltk"
                ) from e
            self._stemmer = PorterStemmer()
        return self._stemmer

    def _get_engine(self):
        if self._engine is None:
            try:
                import inflect
            except ImportError as e:
                raise ImportError(
                    "inflect required. Install: pip install inflect"
                ) from e
            self._engine = inflect.engine()
        return self._engine

    def prepare(self) -> None:
        # First lemmatize call loads the WordNet corpus
        self._get_lemmatizer().lemmatize("prepare", "v")
        self._get_stemmer()
        self._get_engine()

    def lemma(self, word: str) -> str:
        form = to_wordnet_form(word)
        lemmatizer = self._get_lemmatizer()
        for pos in self._LEMMA_POS_ORDER:
            lemma = lemmatizer.lemmatize(form, pos)
            if lemma != form:
                return lemma.replace("_", " ")
        return word

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
            return present_participle(word)
        if person is not None and Person(person) is Person.THIRD_PERSON_SINGULAR:
            return third_person_singular(word)
        return word

    def pluralize(self, word: str) -> str:
        return self._get_engine().plural_noun(word)

    def stem(self, word: str) -> str:
        return self._get_stemmer().stem(word)
