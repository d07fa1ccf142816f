import re
from typing import List, Optional, Tuple

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_index(token) -> Optional[int]:
    """
    Integer value of a state token, or None. Accepts ints and decimal
    strings with an optional sign; bools, underscores and non-ASCII digits
    are rejected.
    """
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token
    text = str(token).strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


class StateSet:
    """
    States 0..n-1 of an automaton, each flagged final or non-final.
    The count is fixed; states are only ever promoted to final.
    """
    def __init__(self, count: int):
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError("count must be an integer")
        if count < 0:
            raise ValueError("count must be non-negative")
        self._final: List[bool] = [False] * count

    def _check(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexError(f"State index must be an integer, got {index!r}")
        if not (0 <= index < len(self._final)):
            raise IndexError(f"State {index} out of range [0,{len(self._final)})")

    def mark_final(self, index: int) -> None:
        self._check(index)
        self._final[index] = True

    def is_final(self, index: int) -> bool:
        self._check(index)
        return self._final[index]

    @property
    def final_states(self) -> Tuple[int, ...]:
        return tuple(i for i, f in enumerate(self._final) if f)

    def copy(self) -> "StateSet":
        other = StateSet(len(self._final))
        other._final = list(self._final)
        return other

    def __len__(self) -> int:
        return len(self._final)

    def __repr__(self):
        return f"StateSet(count={len(self)}, final={list(self.final_states)})"
