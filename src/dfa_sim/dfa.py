from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from .alphabet import Alphabet
from .states import StateSet, parse_index
from .table import Row, Transition, canonical, compress, has_ranges

SENTINEL = "....."


def _dot_label(symbol: str) -> str:
    escaped = symbol.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class Result(Enum):
    ACCEPT = "Accept"
    REJECT = "Reject"

    @property
    def accepted(self) -> bool:
        return self is Result.ACCEPT

    def __str__(self):
        return self.value


class DFA:
    """
    Deterministic finite automaton over states 0..n-1 with start state 0.
    Transitions are kept as an append-only list of (from, symbol, to)
    triples; lookups take the first match in insertion order, so a
    partial automaton simply gets stuck (and rejects) on a missing edge.
    """
    def __init__(self, alphabet: Alphabet, states: StateSet):
        self.alphabet = Alphabet(len(alphabet), alphabet.symbols)
        self.states = states.copy()
        self.transitions: List[Transition] = []
        self.capacity = len(self.states) * len(self.alphabet)

    # --- helpers ---
    def is_valid_state(self, token) -> bool:
        s = parse_index(token)
        return s is not None and 0 <= s < len(self.states)

    def is_valid_symbol(self, token) -> bool:
        return isinstance(token, str) and token in self.alphabet

    @property
    def is_full(self) -> bool:
        return len(self.transitions) >= self.capacity

    # --- construction ---
    def add_transition(self, from_state, symbol, to_state) -> List[str]:
        """
        Append (from_state, symbol, to_state) if all three are valid.
        Returns one message per invalid component; empty means inserted.
        """
        problems = []
        if not self.is_valid_state(from_state):
            problems.append(f"State '{from_state}' does not exist")
        if not self.is_valid_symbol(symbol):
            problems.append(f"Symbol '{symbol}' does not exist")
        if not self.is_valid_state(to_state):
            problems.append(f"State '{to_state}' does not exist")
        if not problems:
            self.transitions.append(Transition(
                parse_index(from_state), symbol, parse_index(to_state)))
        return problems

    # --- simulation ---
    def next_state(self, state: int, symbol: str) -> Optional[int]:
        for t in self.transitions:
            if t.from_state == state and t.symbol == symbol:
                return t.to_state
        return None

    def is_accepting(self, state: int) -> bool:
        return self.states.is_final(state)

    def trace(self, word: Union[str, Iterable[str]]) -> List[Optional[int]]:
        """
        States visited while reading `word`, starting with 0.
        A trailing None means the run got stuck (unknown symbol or no edge).
        A str is read one character per symbol.
        """
        if len(self.states) == 0:
            return [None]
        path: List[Optional[int]] = [0]
        state = 0
        for symbol in word:
            nxt = self.next_state(state, symbol) if symbol in self.alphabet else None
            path.append(nxt)
            if nxt is None:
                break
            state = nxt
        return path

    def run(self, word: Union[str, Iterable[str]]) -> Result:
        last = self.trace(word)[-1]
        if last is not None and self.is_accepting(last):
            return Result.ACCEPT
        return Result.REJECT

    def run_batch(self, words: Iterable[Union[str, Iterable[str]]],
                  sentinel: str = SENTINEL) -> List[Result]:
        results = []
        for w in words:
            if w == sentinel:
                break
            results.append(self.run(w))
        return results

    # --- rendering ---
    def canonical_table(self) -> List[Transition]:
        return canonical(self.transitions)

    def compressed_table(self) -> List[Row]:
        return compress(self.canonical_table())

    def render_tables(self) -> Dict[str, List[Row]]:
        full = self.canonical_table()
        simplified = compress(full)
        tables = {"Full Table": [t.as_row() for t in full]}
        if has_ranges(full, simplified):
            tables["Simplified Table"] = simplified
        return tables

    def to_pydot(self):
        try:
            import pydot
        except ImportError as e:
            raise ImportError("Please install pydot: pip install pydot") from e

        G = pydot.Dot("dfa", graph_type="digraph", rankdir="LR")
        G.add_node(pydot.Node("start", shape="point"))
        for s in range(len(self.states)):
            shape = "doublecircle" if self.is_accepting(s) else "circle"
            G.add_node(pydot.Node(str(s), shape=shape))
        if len(self.states):
            G.add_edge(pydot.Edge("start", "0"))
        for src, symbol, dst in self.compressed_table():
            G.add_edge(pydot.Edge(src, dst, label=_dot_label(symbol)))
        return G

    def to_dot(self) -> str:
        return self.to_pydot().to_string()

    def __repr__(self):
        return (f"DFA(states={len(self.states)}, alphabet={list(self.alphabet.symbols)}, "
                f"accepting={list(self.states.final_states)}, transitions={len(self.transitions)})")
