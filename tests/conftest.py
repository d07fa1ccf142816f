"""
Pytest configuration and fixtures for dfa_sim tests.

Provides small automata shared by unit and integration tests.
"""

import pytest


@pytest.fixture
def ab_dfa():
    """
    Two states, state 1 final, alphabet {a, b}.

    Every symbol leads to state 1, so any non-empty string over {a, b} is accepted.
    """
    from dfa_sim.alphabet import Alphabet
    from dfa_sim.dfa import DFA
    from dfa_sim.states import StateSet

    states = StateSet(2)
    states.mark_final(1)
    dfa = DFA(Alphabet(2, ["a", "b"]), states)
    for t in [("0", "a", "1"), ("0", "b", "1"), ("1", "a", "1"), ("1", "b", "1")]:
        assert dfa.add_transition(*t) == []
    return dfa


@pytest.fixture
def div3_dfa():
    """
    Binary numbers divisible by 3; state i holds the value mod 3.
    """
    from dfa_sim.alphabet import Alphabet
    from dfa_sim.dfa import DFA
    from dfa_sim.states import StateSet

    states = StateSet(3)
    states.mark_final(0)
    dfa = DFA(Alphabet(2, ["0", "1"]), states)
    for i in range(3):
        for bit in (0, 1):
            dfa.add_transition(i, str(bit), (2 * i + bit) % 3)
    return dfa
