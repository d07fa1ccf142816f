from typing import Iterable, Iterator, List, Optional, Tuple


class Alphabet:
    """
    Input symbols of an automaton, in the order they were entered.
    Symbols may repeat; the `symbols` view is de-duplicated and sorted
    so anything iterating an Alphabet sees a deterministic order.
    """
    def __init__(self, capacity_hint: int = 0, symbols: Optional[Iterable[str]] = None):
        if capacity_hint < 0:
            raise ValueError("capacity_hint must be non-negative")
        self._slots: List[Optional[str]] = [None] * capacity_hint
        self._count = 0
        self._view: Optional[Tuple[str, ...]] = None
        self._members: frozenset = frozenset()
        for s in symbols or ():
            self.add(s)

    def add(self, symbol: str) -> None:
        if not isinstance(symbol, str):
            raise TypeError(f"Symbol must be a string, got {type(symbol).__name__}")
        if symbol == "":
            raise ValueError("Symbol must not be empty")
        if self._count == len(self._slots):
            self._slots.append(None)  # grow by exactly one slot
        self._slots[self._count] = symbol
        self._count += 1
        self._view = None

    @property
    def raw(self) -> Tuple[str, ...]:
        """Symbols as entered, duplicates included."""
        return tuple(self._slots[:self._count])

    @property
    def symbols(self) -> Tuple[str, ...]:
        self._refresh()
        return self._view

    def _refresh(self) -> None:
        # the sorted view is rebuilt only after an add
        if self._view is None:
            self._members = frozenset(self.raw)
            self._view = tuple(sorted(self._members))

    def copy(self) -> "Alphabet":
        return Alphabet(self._count, self.raw)

    def __contains__(self, symbol) -> bool:
        if not isinstance(symbol, str):
            return False
        self._refresh()
        return symbol in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self):
        return f"Alphabet({list(self.symbols)})"
