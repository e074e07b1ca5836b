"""Shared vocabulary for lexitrie.

Core concept:
    - Lemma nodes link to their inflected forms by Inflection category
    - POS tags come from two vocabularies: WordNet letters (n, v, a, r)
      and the short frequency-table tags (nn, vbp, jj, ...)
    - normalise_pos_tag() maps the first onto the second

Example:
    "run" (lemma) --past--> "ran"
                  --present_participle--> "running"
                  --third_person_present--> "runs"
"""

from enum import Enum
from typing import Optional


class Inflection(str, Enum):
    """Inflection categories attached to lemma nodes."""

    PAST = "past"
    PRESENT_PARTICIPLE = "present_participle"
    THIRD_PERSON_PRESENT = "third_person_present"
    PLURAL = "plural"


class Tense(str, Enum):
    """Tenses understood by MorphologyProvider.conjugate()."""

    PAST = "past"
    PRESENT = "present"
    PRESENT_PARTICIPLE = "present_participle"


class Person(str, Enum):
    """Grammatical person for present-tense conjugation."""

    THIRD_PERSON_SINGULAR = "third_person_singular"


# WordNet part-of-speech letters
NOUN = "n"
VERB = "v"
ADJECTIVE = "a"
ADVERB = "r"

WORDNET_TO_TAG: dict[str, str] = {
    NOUN: "nn",
    VERB: "vbp",
    ADJECTIVE: "jj",
    ADVERB: "rb",
}

# Frequency-table tags that make a lemma link verb or noun inflections
VERB_LEMMA_TAGS = frozenset({"vb", "vbp"})
NOUN_LEMMA_TAGS = frozenset({"nn", "nnp"})

# Frequency-table tags that generate inflected synonyms from the lemma
PLURAL_NOUN_TAGS = frozenset({"nns", "nnps"})
PAST_TAGS = frozenset({"vbd", "vbn"})
PRESENT_PARTICIPLE_TAGS = frozenset({"vbg"})
THIRD_PERSON_TAGS = frozenset({"vbz"})

# Base forms: already covered by the lemma's own synonyms
UNINFLECTED_TAGS = frozenset({"vb", "vbp", "jj", "nn", "nnp"})

# Closed-class tags that are recognised and never inflected
CLOSED_CLASS_TAGS = frozenset({
    "fw", "in", "ls", "sym", "det", "uh", "ppc", "pp", "ppd", "ppl", "ppr",
    "cd", "wrb", "wdt", "cc", "md", "wp", "wps", "pdt",
})

VERB_INFLECTIONS: tuple[Inflection, ...] = (
    Inflection.PAST,
    Inflection.PRESENT_PARTICIPLE,
    Inflection.THIRD_PERSON_PRESENT,
)


def normalise_pos_tag(tag: str) -> Optional[str]:
    """Map a WordNet POS letter to the frequency-table vocabulary.

    Satellite adjectives ("s") count as adjectives. Unknown letters map to None.
    """
    if tag == "s":
        tag = ADJECTIVE
    return WORDNET_TO_TAG.get(tag)


def inflection_for_tag(tag: str) -> Optional[Inflection]:
    """Get the inflection an inflected frequency tag asks for."""
    if tag in PLURAL_NOUN_TAGS:
        return Inflection.PLURAL
    if tag in PAST_TAGS:
        return Inflection.PAST
    if tag in PRESENT_PARTICIPLE_TAGS:
        return Inflection.PRESENT_PARTICIPLE
    if tag in THIRD_PERSON_TAGS:
        return Inflection.THIRD_PERSON_PRESENT
    return None
