"""Base interface for morphology providers.

A provider is a set of pure functions over strings. It knows nothing about
the dictionary: callers validate every generated form against the trie.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..schema import Inflection, Person, Tense


class MorphologyProvider(ABC):
    """Base class for lemmatizing, inflecting and stemming backends."""

    name: str = "base"

    @abstractmethod
    def lemma(self, word: str) -> str:
        """Base form of a word, or the word itself if it has none."""
        pass

    @abstractmethod
    def conjugate(
        self,
        word: str,
        tense: Tense | str,
        person: Optional[Person | str] = None,
    ) -> str:
        """Conjugate a verb.

        Args:
            word: Verb in base form.
            tense: Tense to produce.
            person: Person for present tense; ignored otherwise.

        Returns:
            Conjugated surface form.
        """
        pass

    @abstractmethod
    def pluralize(self, word: str) -> str:
        """Plural of a noun."""
        pass

    @abstractmethod
    def stem(self, word: str) -> str:
        """Stem of a word, used for derivational similarity checks."""
        pass

    def prepare(self) -> None:
        """Load any lazy resources before the provider is shared by threads."""
        pass

    def inflected_form(self, word: str, inflection: Inflection) -> str:
        """Produce one of the fixed inflection categories.

        Args:
            word: Lemma.
            inflection: Category to produce.

        Returns:
            Surface form for that category.
        """
        if inflection is Inflection.PLURAL:
            return self.pluralize(word)
        if inflection is Inflection.PAST:
            return self.conjugate(word, Tense.PAST)
        if inflection is Inflection.PRESENT_PARTICIPLE:
            return self.conjugate(word, Tense.PRESENT_PARTICIPLE)
        if inflection is Inflection.THIRD_PERSON_PRESENT:
            return self.conjugate(
                word, Tense.PRESENT, Person.THIRD_PERSON_SINGULAR
            )
        raise ValueError(f"Unknown inflection: {inflection}")
