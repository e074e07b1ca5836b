"""Character trie with predicate-driven search.

The Trie owns every TrieNode in a flat list (an arena). Nodes refer to each
other by index: a child map from character to index, a non-owning parent
index used only to rebuild a node's path, and the lemma/inflection links
written by the morphology linker.

Search is one generic traversal driven by two predicates:
    - character comparator: may descent continue through this node?
    - destination comparator: is this node's path a result?

Usage:
    from lexitrie.trie import Trie

    trie = Trie()
    for word in ["cat", "car", "cap", "dog"]:
        trie.insert(word)

    trie.find("cat")               # ["cat"]
    trie.find_masked("ca?")        # ["cat", "car", "cap"]
    trie.find_starting_with("ca")  # ["cat", "car", "cap"]
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from .schema import Inflection

ROOT = 0
WILDCARD = "?"


@dataclass(repr=False)
class TrieNode:
    """One character position in the trie.

    depth is the node's index into a target string: the root is -1, the
    first character 0, and so on. It is fixed when the node is created.
    """

    index: int
    character: Optional[str] = None
    parent: Optional[int] = None
    depth: int = -1
    children: dict[str, int] = field(default_factory=dict)
    is_word: bool = False
    lemma: Optional[int] = None
    inflections: dict[Inflection, int] = field(default_factory=dict)
    synonyms: list[str] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_lemma(self) -> bool:
        """A node is a lemma if its lemma is itself."""
        return self.lemma == self.index

    def __repr__(self) -> str:
        return (
            f"<TrieNode index={self.index} character={self.character!r} "
            f"is_word={self.is_word} is_lemma={self.is_lemma}>"
        )


Comparator = Callable[[str, TrieNode], bool]


# =============================================================================
# Comparators
# =============================================================================

def exact_character(target: str, node: TrieNode) -> bool:
    """Node character equals the target character at the node's depth."""
    return node.depth < len(target) and target[node.depth] == node.character


def exact_destination(target: str, node: TrieNode) -> bool:
    """Node spells a word exactly as long as the target."""
    return node.depth + 1 == len(target) and node.is_word


def masked_character(wildcard: str = WILDCARD) -> Comparator:
    """Build a comparator where the wildcard matches any character."""

    def compare(target: str, node: TrieNode) -> bool:
        if node.depth >= len(target):
            return False
        char = target[node.depth]
        return char == node.character or char == wildcard

    return compare


def prefix_character(target: str, node: TrieNode) -> bool:
    """Match within the target, accept anything past its end."""
    return node.depth >= len(target) or target[node.depth] == node.character


def prefix_destination(target: str, node: TrieNode) -> bool:
    """Accept the target itself or any word extending it."""
    return node.depth >= len(target) - 1 and node.is_word


# =============================================================================
# Trie
# =============================================================================

class Trie:
    """Arena-backed character trie."""

    def __init__(self):
        self._nodes: list[TrieNode] = [TrieNode(index=ROOT)]
        self._word_count = 0

    @property
    def root(self) -> TrieNode:
        return self._nodes[ROOT]

    def node(self, index: int) -> TrieNode:
        """Get a node by arena index."""
        return self._nodes[index]

    def node_count(self) -> int:
        """Number of nodes, root included."""
        return len(self._nodes)

    def insert(self, word: str) -> TrieNode:
        """Insert a word, creating one node per new character.

        Args:
            word: Word to insert. Inserting it again changes nothing.

        Returns:
            The node spelling the word.
        """
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode(
                    index=child,
                    character=char,
                    parent=node.index,
                    depth=node.depth + 1,
                ))
                node.children[char] = child
            node = self._nodes[child]

        if not node.is_word:
            node.is_word = True
            self._word_count += 1
        return node

    def lookup(self, string: str) -> Optional[TrieNode]:
        """Descend one character at a time.

        Args:
            string: Word or prefix.

        Returns:
            Node for the exact path, or None if any character is missing.
            The node need not be a word.
        """
        node = self.root
        for char in string:
            child = node.children.get(char)
            if child is None:
                return None
            node = self._nodes[child]
        return node

    def contains(self, word: str) -> bool:
        """Check whether a word (not just a prefix) is present."""
        node = self.lookup(word)
        return node is not None and node.is_word

    def path_of(self, node: TrieNode) -> list[str]:
        """Characters from the root down to the node."""
        chars = []
        while node.parent is not None:
            chars.append(node.character)
            node = self._nodes[node.parent]
        chars.reverse()
        return chars

    def word_of(self, node: TrieNode) -> str:
        """String spelled by the path to the node."""
        return "".join(self.path_of(node))

    def word_nodes(self) -> Iterator[TrieNode]:
        """Iterate every node marked as a word."""
        for node in self._nodes:
            if node.is_word:
                yield node

    def iter_search(
        self,
        target: str,
        character_comparator: Optional[Comparator] = None,
        destination_comparator: Optional[Comparator] = None,
        deep_search: bool = False,
    ) -> Iterator[str]:
        """Walk the trie, yielding the path of every destination node.

        The root always matches. Any other node must satisfy the character
        comparator or its whole subtree is pruned. A matching node that also
        satisfies the destination comparator is yielded; descent below it
        stops unless deep_search is set.

        Args:
            target: String the comparators are evaluated against.
            character_comparator: Defaults to exact_character.
            destination_comparator: Defaults to exact_destination.
            deep_search: Keep descending below destinations.

        Yields:
            Paths of destination nodes, depth first.
        """
        char_match = character_comparator or exact_character
        dest_match = destination_comparator or exact_destination

        stack = [ROOT]
        while stack:
            node = self._nodes[stack.pop()]
            if not node.is_root and not char_match(target, node):
                continue

            if dest_match(target, node):
                yield self.word_of(node)
                if not deep_search:
                    continue

            stack.extend(reversed(list(node.children.values())))

    def search(
        self,
        target: str,
        character_comparator: Optional[Comparator] = None,
        destination_comparator: Optional[Comparator] = None,
        deep_search: bool = False,
    ) -> list[str]:
        """List form of iter_search()."""
        return list(self.iter_search(
            target,
            character_comparator=character_comparator,
            destination_comparator=destination_comparator,
            deep_search=deep_search,
        ))

    def find(self, word: str) -> list[str]:
        """Exact match."""
        return self.search(word)

    def find_masked(self, pattern: str, wildcard: str = WILDCARD) -> list[str]:
        """Fixed-length match where the wildcard stands for any character."""
        return self.search(pattern, character_comparator=masked_character(wildcard))

    def find_starting_with(self, prefix: str) -> list[str]:
        """Every word beginning with the prefix, the prefix itself included."""
        return self.search(
            prefix,
            character_comparator=prefix_character,
            destination_comparator=prefix_destination,
            deep_search=True,
        )

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        for node in self.word_nodes():
            yield self.word_of(node)

    def __repr__(self) -> str:
        return f"<Trie words={self._word_count} nodes={len(self._nodes)}>"
