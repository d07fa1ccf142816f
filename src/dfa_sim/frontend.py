"""
Line grammar for entering an automaton interactively.

    states:       "3"
    final states: "0 2" or "0,2" or "0, 2"
    alphabet:     "a b", "letters", "numbers", "2-7", "a-z", "G-M"
    transitions:  "p a q" or "(p a q)"; the symbol may be "letters",
                  "numbers" or a range such as "a-f"
    test strings: any other line, whitespace removed, until the sentinel

Everything here turns text into validated primitive values; nothing
prints. Problems come back as diagnostic strings.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .alphabet import Alphabet
from .dfa import SENTINEL
from .states import parse_index
from .table import symbol_range

LETTERS = [c for pair in zip("abcdefghijklmnopqrstuvwxyz",
                             "ABCDEFGHIJKLMNOPQRSTUVWXYZ") for c in pair]
NUMBERS = [str(d) for d in range(10)]

_RANGE_RE = re.compile(r"^(.+)-(.+)$")
_SEP_RE = re.compile(r"[,\s]+")


class FrontEndError(ValueError):
    pass


@dataclass
class Session:
    sentinel: str = SENTINEL
    max_test_strings: int = 20


# --- helpers ---
def _tokens(line: str) -> List[str]:
    return [t for t in _SEP_RE.split(line.strip()) if t]


def _range(token: str) -> Optional[List[str]]:
    m = _RANGE_RE.match(token)
    if not m:
        return None
    return symbol_range(m.group(1), m.group(2))


def _is_range_syntax(token: str) -> bool:
    return _RANGE_RE.match(token) is not None


def _strip_parens(line: str) -> str:
    line = line.strip()
    if len(line) >= 2 and line[0] == "(" and line[-1] == ")":
        return line[1:-1]
    return line


# --- states ---
def parse_state_count(line: str) -> int:
    count = parse_index(line)
    if count is None:
        raise FrontEndError("You must enter an integer")
    if count < 0:
        raise FrontEndError("Number of states must not be negative")
    return count


def parse_final_states(line: str, count: int) -> Tuple[List[int], List[str]]:
    finals, problems = [], []
    for tok in _tokens(line):
        index = parse_index(tok)
        if index is not None and 0 <= index < count:
            finals.append(index)
        else:
            problems.append(f"State '{tok}' does not exist")
    return finals, problems


# --- alphabet ---
def expand_symbols(token: str) -> List[str]:
    """Symbols named by one alphabet token; malformed ranges name none."""
    if token == "letters":
        return list(LETTERS)
    if token == "numbers":
        return list(NUMBERS)
    if _is_range_syntax(token):
        return _range(token) or []
    return [token]


def parse_alphabet(line: str) -> Alphabet:
    tokens = _tokens(line)
    alphabet = Alphabet(len(tokens))
    for tok in tokens:
        for s in expand_symbols(tok):
            alphabet.add(s)
    return alphabet


# --- transitions ---
def is_transition_line(line: str) -> bool:
    return len(_strip_parens(line).split()) == 3


def parse_transition(line: str) -> Tuple[List[Tuple[str, str, str]], List[str]]:
    """
    Triples described by one transition line, left as strings for the
    engine to validate. A symbol range that is not a single-character,
    same-class, ascending range is reported and yields no triples.
    """
    fields = _strip_parens(line).split()
    if len(fields) != 3:
        return [], [f"Not a transition: '{line.strip()}'"]
    src, symbol, dst = fields
    if symbol in ("letters", "numbers"):
        symbols = expand_symbols(symbol)
    elif _is_range_syntax(symbol):
        symbols = _range(symbol)
        if symbols is None:
            return [], ["Range not accepted"]
    else:
        symbols = [symbol]
    return [(src, s, dst) for s in symbols], []


# --- test strings ---
def clean_test_string(line: str) -> str:
    return re.sub(r"\s", "", line)
