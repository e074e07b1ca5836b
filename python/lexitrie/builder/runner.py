"""Per-node pass runner shared by the linker and the curator.

Each pass visits every word node once and writes only to that node, so the
visits can be spread over a thread pool. Results come back in node order
and the progress callback always runs on the calling thread.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional, TypeVar

from ..trie import TrieNode

R = TypeVar("R")

Progress = Callable[[], None]


def visit_all(
    nodes: Iterable[TrieNode],
    visit: Callable[[TrieNode], R],
    workers: int = 1,
    progress: Optional[Progress] = None,
) -> list[R]:
    """Run visit over every node.

    Args:
        nodes: Word nodes to visit.
        visit: Function called once per node.
        workers: Thread count; 1 or less runs inline.
        progress: Called once after each node.

    Returns:
        Visit results in node order.
    """
    results: list[R] = []

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for result in executor.map(visit, nodes):
                results.append(result)
                if progress:
                    progress()
        return results

    for node in nodes:
        results.append(visit(node))
        if progress:
            progress()
    return results
