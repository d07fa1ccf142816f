from typing import Iterable, List, NamedTuple, Optional, Tuple

Row = Tuple[str, str, str]


class Transition(NamedTuple):
    from_state: int
    symbol: str
    to_state: int

    def as_row(self) -> Row:
        return (str(self.from_state), self.symbol, str(self.to_state))


# --- symbol classes ---
def symbol_class(symbol: str) -> Optional[str]:
    """
    Class of a single-character symbol for range compression:
    "digit" (0-9), "lower" (a-z), "upper" (A-Z), or None.
    Multi-character symbols have no class and are never compressed.
    """
    if len(symbol) != 1:
        return None
    if "0" <= symbol <= "9":
        return "digit"
    if "a" <= symbol <= "z":
        return "lower"
    if "A" <= symbol <= "Z":
        return "upper"
    return None


def symbol_range(first: str, last: str) -> Optional[List[str]]:
    cls = symbol_class(first)
    if cls is None or symbol_class(last) != cls or first > last:
        return None
    return [chr(c) for c in range(ord(first), ord(last) + 1)]


def expand_symbol_range(text: str) -> Optional[List[str]]:
    """'a-c' -> ['a', 'b', 'c']; None unless text is an ascending same-class range."""
    if len(text) != 3 or text[1] != "-":
        return None
    return symbol_range(text[0], text[2])


# --- canonical table ---
def sort_key(t: Transition) -> Row:
    # State numbers compare as strings, so "10" sorts before "2".
    return t.as_row()


def canonical(transitions: Iterable[Transition]) -> List[Transition]:
    unique = dict.fromkeys(transitions)
    return sorted(unique, key=sort_key)


# --- range compression ---
def _extends_run(head: Transition, prev: Transition, cur: Transition, cls: str) -> bool:
    return (cur.from_state == head.from_state
            and cur.to_state == head.to_state
            and symbol_class(cur.symbol) == cls
            and ord(cur.symbol) == ord(prev.symbol) + 1)


def compress(table: List[Transition]) -> List[Row]:
    """
    Collapse runs of consecutive rows that share from/to states and whose
    symbols are consecutive within one class into a single "first-last" row.
    `table` must already be canonical.
    """
    out: List[Row] = []
    i, n = 0, len(table)
    while i < n:
        head = table[i]
        cls = symbol_class(head.symbol)
        j = i + 1
        if cls is not None:
            while j < n and _extends_run(head, table[j - 1], table[j], cls):
                j += 1
        last = table[j - 1]
        symbol = head.symbol if j - i == 1 else f"{head.symbol}-{last.symbol}"
        out.append((str(head.from_state), symbol, str(head.to_state)))
        i = j
    return out


def expand_row(row: Row, alphabet: Iterable[str] = ()) -> List[Row]:
    """
    Inverse of compression for one row; plain rows expand to themselves.
    A symbol found in `alphabet` is a literal even if it reads like a
    range ("a-c"); compression passes such symbols through unchanged.
    """
    src, symbol, dst = row
    symbols = None if symbol in alphabet else expand_symbol_range(symbol)
    if symbols is None:
        return [row]
    return [(src, s, dst) for s in symbols]


def has_ranges(full: List[Transition], simplified: List[Row]) -> bool:
    return len(simplified) != len(full)
