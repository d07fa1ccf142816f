from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from dfa_sim.alphabet import Alphabet
from dfa_sim.dfa import DFA
from dfa_sim.plotter import plot_results, plot_transition_matrix, transition_matrix
from dfa_sim.states import StateSet


def test_transition_matrix_first_match(div3_dfa) -> None:
    div3_dfa.add_transition(0, "0", 2)
    m = transition_matrix(div3_dfa)
    assert m.shape == (3, 2)
    assert np.array_equal(m, np.array([[0, 1], [2, 0], [1, 2]]))


def test_transition_matrix_marks_missing() -> None:
    dfa = DFA(Alphabet(symbols=["b", "a"]), StateSet(2))
    dfa.add_transition(1, "b", 0)
    assert transition_matrix(dfa).tolist() == [[-1, -1], [-1, 0]]


def test_plot_transition_matrix(ab_dfa) -> None:
    ax = plot_transition_matrix(ab_dfa)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["a", "b"]
    assert [t.get_text() for t in ax.get_yticklabels()] == ["0", "*1"]
    assert len(ax.texts) == 4
    plt.close("all")


def test_plot_transition_matrix_empty() -> None:
    ax = plot_transition_matrix(DFA(Alphabet(), StateSet(0)))
    assert len(ax.texts) == 0
    plt.close("all")


def test_plot_results(ab_dfa) -> None:
    words = ["a", "", "c"]
    ax = plot_results(words, ab_dfa.run_batch(words))
    heights = [p.get_height() for p in ax.patches]
    assert heights == [1, 0, 0]
    assert [t.get_text() for t in ax.get_xticklabels()] == ["a", "(empty)", "c"]
    plt.close("all")
