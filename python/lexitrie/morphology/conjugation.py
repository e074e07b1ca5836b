"""Rule tables for English verb conjugation.

Past tense and third-person-singular present are produced by a lookup in
the irregular tables first, then by suffix rules. The present participle
has no irregular table and shares the consonant-doubling rule with the
past tense. Phrasal entries
("give up") conjugate their head word only.
"""

import re
from typing import Callable

IRREGULAR_PAST: dict[str, str] = {
    "arise": "arose", "awake": "awoke", "be": "was", "bear": "bore",
    "beat": "beat", "become": "became", "begin": "began", "bend": "bent",
    "bet": "bet", "bind": "bound", "bite": "bit", "bleed": "bled",
    "blow": "blew", "break": "broke", "breed": "bred", "bring": "brought",
    "build": "built", "burst": "burst", "buy": "bought", "cast": "cast",
    "catch": "caught", "choose": "chose", "cling": "clung", "come": "came",
    "cost": "cost", "creep": "crept", "cut": "cut", "deal": "dealt",
    "dig": "dug", "do": "did", "draw": "drew", "drink": "drank",
    "drive": "drove", "eat": "ate", "fall": "fell", "feed": "fed",
    "feel": "felt", "fight": "fought", "find": "found", "flee": "fled",
    "fling": "flung", "fly": "flew", "forbid": "forbade", "forget": "forgot",
    "forgive": "forgave", "freeze": "froze", "get": "got", "give": "gave",
    "go": "went", "grind": "ground", "grow": "grew", "hang": "hung",
    "have": "had", "hear": "heard", "hide": "hid", "hit": "hit",
    "hold": "held", "hurt": "hurt", "keep": "kept", "kneel": "knelt",
    "know": "knew", "lay": "laid", "lead": "led", "leave": "left",
    "lend": "lent", "let": "let", "lie": "lay", "light": "lit",
    "lose": "lost", "make": "made", "mean": "meant", "meet": "met",
    "pay": "paid", "put": "put", "quit": "quit", "read": "read",
    "ride": "rode", "ring": "rang", "rise": "rose", "run": "ran",
    "say": "said", "see": "saw", "seek": "sought", "sell": "sold",
    "send": "sent", "set": "set", "shake": "shook", "shine": "shone",
    "shoot": "shot", "shrink": "shrank", "shut": "shut", "sing": "sang",
    "sink": "sank", "sit": "sat", "sleep": "slept", "slide": "slid",
    "speak": "spoke", "spend": "spent", "spin": "spun", "spit": "spat",
    "split": "split", "spread": "spread", "spring": "sprang",
    "stand": "stood", "steal": "stole", "sting": "stung", "stink": "stank",
    "stride": "strode", "strike": "struck", "string": "strung",
    "swear": "swore", "sweep": "swept", "swim": "swam", "swing": "swung",
    "take": "took", "teach": "taught", "tear": "tore", "tell": "told",
    "think": "thought", "throw": "threw", "tread": "trod",
    "understand": "understood", "wake": "woke", "wear": "wore",
    "weave": "wove", "weep": "wept", "win": "won", "wind": "wound",
    "wring": "wrung", "write": "wrote",
}

IRREGULAR_THIRD_PERSON: dict[str, str] = {
    "be": "is",
    "have": "has",
    "do": "does",
    "go": "goes",
}

VOWELS = "aeiou"

# Single stressed vowel followed by a consonant that doubles: stop -> stopped
DOUBLING_PATTERN = re.compile(r"[^aeiou][aeiou][bdgklmnprst]$")
VOWEL_GROUP_PATTERN = re.compile(r"[aeiou]+")
SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh", "o")
# Endings that keep their final e before -ing: see -> seeing
KEEP_FINAL_E = ("ee", "ye", "oe")


def _ends_consonant_y(word: str) -> bool:
    return len(word) > 1 and word.endswith("y") and word[-2] not in VOWELS


def _doubles_final_consonant(word: str) -> bool:
    return (
        bool(DOUBLING_PATTERN.search(word))
        and len(VOWEL_GROUP_PATTERN.findall(word)) == 1
    )


def map_head(phrase: str, transform: Callable[[str], str]) -> str:
    """Apply transform to the first word of a phrase, keeping the rest."""
    head, sep, rest = phrase.partition(" ")
    return transform(head) + sep + rest


def _past(verb: str) -> str:
    lower = verb.lower()
    if lower in IRREGULAR_PAST:
        return IRREGULAR_PAST[lower]
    if lower.endswith("e"):
        return verb + "d"
    if _ends_consonant_y(lower):
        return verb[:-1] + "ied"
    if lower.endswith("c"):
        return verb + "ked"
    if _doubles_final_consonant(lower):
        return verb + verb[-1] + "ed"
    return verb + "ed"


def _present_participle(verb: str) -> str:
    lower = verb.lower()
    if lower.endswith("ie"):
        return verb[:-2] + "ying"
    if len(lower) > 2 and lower.endswith("e") and not lower.endswith(KEEP_FINAL_E):
        return verb[:-1] + "ing"
    if lower.endswith("c"):
        return verb + "king"
    if _doubles_final_consonant(lower):
        return verb + verb[-1] + "ing"
    return verb + "ing"


def _third_person(verb: str) -> str:
    lower = verb.lower()
    if lower in IRREGULAR_THIRD_PERSON:
        return IRREGULAR_THIRD_PERSON[lower]
    if _ends_consonant_y(lower):
        return verb[:-1] + "ies"
    if lower.endswith(SIBILANT_ENDINGS):
        return verb + "es"
    return verb + "s"


def past_tense(verb: str) -> str:
    """Simple past of a verb or phrasal verb.

    Args:
        verb: Base form, eg. "walk" or "give up".

    Returns:
        Past form, eg. "walked" or "gave up".
    """
    if not verb:
        return verb
    return map_head(verb, _past)


def third_person_singular(verb: str) -> str:
    """Third-person-singular present of a verb or phrasal verb.

    Args:
        verb: Base form, eg. "watch" or "look up".

    Returns:
        Present form, eg. "watches" or "looks up".
    """
    if not verb:
        return verb
    return map_head(verb, _third_person)


def present_participle(verb: str) -> str:
    """Present participle of a verb or phrasal verb, eg. "giving up"."""
    if not verb:
        return verb
    return map_head(verb, _present_participle)
