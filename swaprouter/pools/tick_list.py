"""Ordered, read-only collection of a pool's initialized ticks."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from swaprouter.errors import InvalidTickList
from swaprouter.pools.tick import Tick


class TickList:
    """Initialized ticks sorted strictly by index.

    Built once from a caller-supplied collection and never mutated; updates
    (such as crossing a tick during a swap) produce a new TickList.

    Raises:
        InvalidTickList: If ``ticks`` is empty or two ticks share an index
    """

    __slots__ = ("_ticks", "_indices")

    def __init__(self, ticks: Iterable[Tick]) -> None:
        ordered = tuple(sorted(ticks, key=lambda tick: tick.index))
        if not ordered:
            raise InvalidTickList("Must have at least one initialized tick")
        indices = tuple(tick.index for tick in ordered)
        for previous, current in zip(indices, indices[1:]):
            if previous == current:
                raise InvalidTickList(f"Duplicate tick index {current}")
        self._ticks = ordered
        self._indices = indices

    def __len__(self) -> int:
        return len(self._ticks)

    def __iter__(self) -> Iterator[Tick]:
        return iter(self._ticks)

    def __getitem__(self, position: int) -> Tick:
        return self._ticks[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickList):
            return NotImplemented
        return self._ticks == other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"TickList({list(self._indices)})"

    def get_tick(self, index: int) -> Tick:
        """Look up a tick by its index.

        Raises:
            KeyError: If no tick is initialized at ``index``
        """
        position = bisect_left(self._indices, index)
        if position < len(self._indices) and self._indices[position] == index:
            return self._ticks[position]
        raise KeyError(index)

    def next_initialized_below(self, index: int) -> Tick | None:
        """Highest tick strictly below ``index``, or None past the lowest tick.

        None means the price is outside all tracked ticks on that side; the
        swap math then treats the current liquidity as extending to the
        protocol price bound.
        """
        position = bisect_left(self._indices, index)
        if position == 0:
            return None
        return self._ticks[position - 1]

    def next_initialized_at_or_above(self, index: int) -> Tick | None:
        """Lowest tick at or above ``index``, or None past the highest tick."""
        position = bisect_left(self._indices, index)
        if position == len(self._ticks):
            return None
        return self._ticks[position]

    def replace(self, *updated: Tick) -> TickList:
        """A new TickList with the ticks at the same indices swapped for ``updated``.

        Raises:
            KeyError: If an updated tick's index is not already initialized
        """
        by_index = {tick.index: tick for tick in self._ticks}
        for tick in updated:
            if tick.index not in by_index:
                raise KeyError(tick.index)
            by_index[tick.index] = tick
        return TickList(by_index.values())


__all__ = ["TickList"]
