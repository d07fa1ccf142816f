from typing import List, Sequence

from .dfa import DFA, Result


def format_final_states(dfa: DFA) -> str:
    finals = dfa.states.final_states
    return ", ".join(str(s) for s in finals) if finals else "none"


def format_alphabet(dfa: DFA) -> str:
    return ", ".join(dfa.alphabet.symbols)


def format_tables(dfa: DFA) -> List[str]:
    tables = dfa.render_tables()
    if not tables["Full Table"]:
        return ["\tNo transitions"]
    lines = []
    titled = len(tables) > 1  # titles only when both tables are shown
    for title, rows in tables.items():
        if titled:
            lines.append(title)
        lines.extend("\t" + " ".join(row) for row in rows)
    return lines


def _pad(word: str) -> str:
    # keep the result column aligned on 8-wide tab stops
    if word == "":
        return "\t(empty)\t\t\t"
    if len(word) >= 16:
        return "\t" + word + "\t"
    if len(word) >= 8:
        return "\t" + word + "\t\t"
    return "\t" + word + "\t\t\t"


def format_results(words: Sequence[str], results: Sequence[Result]) -> List[str]:
    if not words:
        return ["\tNo strings to test"]
    return [_pad(w) + str(r) for w, r in zip(words, results)]


def format_report(dfa: DFA, words: Sequence[str], results: Sequence[Result]) -> List[str]:
    lines = [
        f"number of states: {len(dfa.states)}",
        f"final states: {format_final_states(dfa)}",
        f"alphabet: {format_alphabet(dfa)}",
        "transitions: ",
    ]
    lines += format_tables(dfa)
    lines.append("strings: ")
    lines += format_results(words, results)
    return lines
