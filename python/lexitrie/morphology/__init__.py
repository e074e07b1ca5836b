"""Morphology module for lexitrie.

Provides pluggable lemmatization, conjugation, pluralization and stemming.

Usage:
    from lexitrie.morphology import get_provider

    morphology = get_provider("english")
    morphology.lemma("running")                     # "run"
    morphology.conjugate("run", "past")             # "ran"
    morphology.pluralize("coach")                   # "coaches"
    morphology.stem("discoloured")                  # "discolour"
"""

from .base import MorphologyProvider
from .english import EnglishMorphology
from .registry import get_provider, register_provider, list_providers

__all__ = [
    "MorphologyProvider",
    "EnglishMorphology",
    "get_provider",
    "register_provider",
    "list_providers",
]
