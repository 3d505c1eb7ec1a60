"""Disjoint set forest with union by rank, path compression and removal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass
class _Element:
    value: Any
    parent: int
    rank: int = 0


class DisjointSetForest:
    """Partition of integer keys into disjoint sets, each key carrying a value."""

    def __init__(self, initial_elements: Mapping[int, Any] | None = None) -> None:
        self._elements: dict[int, _Element] = {}
        self._set_count = 0
        if initial_elements:
            self.add_elements(initial_elements)

    def add_element(self, x: int, value: Any = None) -> None:
        """Add ``x`` as a new singleton set; an existing key keeps its data."""
        self._elements.setdefault(x, _Element(value, x))
        self._set_count += 1

    def add_elements(self, elements: Mapping[int, Any]) -> None:
        """Add every key of ``elements`` with its value as a singleton set."""
        for key, value in sorted(elements.items()):
            self._elements.setdefault(key, _Element(value, key))
        self._set_count += len(elements)

    def find_nodes_on_same_set(self, root: int) -> set[int]:
        """Return every element whose representative is ``root``."""
        return {key for key in list(self._elements) if self.find_set(key) == root}

    def remove_element(self, x: int) -> None:
        """Remove ``x`` and rebuild the links of the elements that shared its set."""
        root = self.find_set(x)
        related = self.find_nodes_on_same_set(root)

        rebuilt = DisjointSetForest()
        for idx in sorted(related):
            if idx == x or idx in rebuilt:
                continue
            current = idx
            rebuilt.add_element(current)
            while True:
                parent = self._elements[current].parent
                if parent == current or parent == x:
                    break
                rebuilt.add_element(parent)
                rebuilt.union_sets(current, parent)
                current = parent

        for key in sorted(rebuilt.get_element_keys()):
            self._elements[key].parent = rebuilt.find_set(key)
        del self._elements[x]

    def element_count(self) -> int:
        return len(self._elements)

    def find_set(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        path = []
        current = x
        while True:
            parent = self._get(current).parent
            if parent == current:
                break
            path.append(current)
            current = parent
        for node in path:
            self._elements[node].parent = current
        return current

    def set_count(self) -> int:
        return self._set_count

    def union_sets(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``; a no-op if they already match."""
        set_x = self.find_set(x)
        set_y = self.find_set(y)
        if set_x != set_y:
            self._link(set_x, set_y)

    def remove_union(self, x: int, y: int) -> None:
        """Split the set holding ``x`` and ``y`` if both are in the same set."""
        set_x = self.find_set(x)
        set_y = self.find_set(y)
        if set_x == set_y:
            self._unlink(set_x, set_y)

    def value_of(self, x: int) -> Any:
        return self._get(x).value

    def rank_of(self, x: int) -> int:
        return self._get(x).rank

    def __contains__(self, x: object) -> bool:
        return x in self._elements

    def get_element_keys(self) -> set[int]:
        return set(self._elements)

    def _get(self, x: int) -> _Element:
        try:
            return self._elements[x]
        except KeyError:
            raise KeyError(f"No such element: {x}") from None

    def _link(self, x: int, y: int) -> None:
        element_x = self._get(x)
        element_y = self._get(y)
        if element_x.rank > element_y.rank:
            element_y.parent = x
        else:
            element_x.parent = y
            if element_x.rank == element_y.rank:
                element_y.rank += 1
        self._set_count -= 1

    def _unlink(self, x: int, y: int) -> None:
        root = self.find_set(x)
        indices = self.find_nodes_on_same_set(root)

        set_x: set[int] = set()
        set_y: set[int] = set()
        top_rank_x = top_rank_y = 0
        top_idx_x = top_idx_y = 0

        for idx in sorted(indices):
            current = idx
            while True:
                element = self._elements[current]
                parent = element.parent
                if parent == root:
                    break
                if parent == x:
                    set_x.add(current)
                    if element.rank > top_rank_x:
                        top_rank_x, top_idx_x = element.rank, current
                    break
                if parent == y:
                    set_y.add(current)
                    if element.rank > top_rank_y:
                        top_rank_y, top_idx_y = element.rank, current
                    break
                current = parent

        set_x.add(x)
        set_y.add(y)
        self._reparent(set_x, top_idx_x)
        self._reparent(set_y, top_idx_y)

    def _reparent(self, keys: Iterable[int], parent: int) -> None:
        for key in keys:
            self._elements[key].parent = parent