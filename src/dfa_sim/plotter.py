import matplotlib.pyplot as plt
import numpy as np

from .dfa import DFA


def transition_matrix(dfa: DFA) -> np.ndarray:
    """
    states x alphabet matrix of destination states, -1 where the
    automaton has no transition. Columns follow the sorted alphabet.
    """
    symbols = dfa.alphabet.symbols
    m = np.full((len(dfa.states), len(symbols)), -1, dtype=int)
    for i in range(len(dfa.states)):
        for j, a in enumerate(symbols):
            nxt = dfa.next_state(i, a)
            if nxt is not None:
                m[i, j] = nxt
    return m


def plot_transition_matrix(dfa: DFA, ax=None, show: bool = False):
    m = transition_matrix(dfa)
    if ax is None:
        _, ax = plt.subplots(figsize=(max(4, 0.6 * m.shape[1] + 2), max(3, 0.5 * m.shape[0] + 1)))

    # missing transitions stay blank
    if m.size:
        masked = np.ma.masked_less(m, 0)
        ax.imshow(masked, cmap="viridis", aspect="auto",
                  vmin=0, vmax=max(len(dfa.states) - 1, 1))

    for (i, j), v in np.ndenumerate(m):
        ax.text(j, i, "-" if v < 0 else str(v), ha="center", va="center", color="white")

    finals = set(dfa.states.final_states)
    ax.set_xticks(np.arange(m.shape[1]))
    ax.set_xticklabels(dfa.alphabet.symbols)
    ax.set_yticks(np.arange(m.shape[0]))
    ax.set_yticklabels([f"*{s}" if s in finals else str(s) for s in range(m.shape[0])])
    ax.set_xlabel("Symbol")
    ax.set_ylabel("State (* = final)")
    ax.set_title("Transition table")

    if show:
        plt.tight_layout()
        plt.show()
    return ax


def plot_results(words, results, ax=None, show: bool = False):
    accepted = np.array([1 if r.accepted else 0 for r in results])
    labels = [w if w else "(empty)" for w in words[:len(accepted)]]
    if ax is None:
        _, ax = plt.subplots(figsize=(max(4, 0.5 * len(labels) + 2), 3))

    colors = ["tab:green" if a else "tab:red" for a in accepted]
    ax.bar(np.arange(len(accepted)), accepted, color=colors)
    ax.set_xticks(np.arange(len(accepted)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_yticks([0, 1])
    ax.set_yticklabels(["Reject", "Accept"])
    ax.set_title("Test strings")

    if show:
        plt.tight_layout()
        plt.show()
    return ax
