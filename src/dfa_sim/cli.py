import argparse
from typing import List, Optional

from .dfa import DFA, SENTINEL
from .frontend import (FrontEndError, Session, clean_test_string, is_transition_line,
                       parse_alphabet, parse_final_states, parse_state_count,
                       parse_transition)
from .report import format_report
from .states import StateSet


def _read() -> Optional[str]:
    try:
        return input()
    except EOFError:
        return None


def _print_all(lines: List[str]):
    for ln in lines:
        print(ln)


def read_transitions(dfa: DFA) -> Optional[List[str]]:
    """
    Feed transition lines into `dfa` until a line that is not a transition
    (returned as the pending first test string) or the table is full
    (nothing pending). None means input ran out.
    """
    while True:
        line = _read()
        if line is None:
            return None
        if not is_transition_line(line):
            return [line]
        triples, problems = parse_transition(line)
        _print_all(problems)
        for src, symbol, dst in triples:
            _print_all(dfa.add_transition(src, symbol, dst))
            if dfa.is_full:
                print("Enter test strings:")
                return []


def read_test_strings(pending: Optional[List[str]], session: Session) -> List[str]:
    words: List[str] = []
    if pending is None or [clean_test_string(p) for p in pending] == [session.sentinel]:
        return words
    if pending:
        print(f"Read as a test string, enter up to {session.max_test_strings - 1} "
              f"test strings, ('{session.sentinel}' to finish): ")
        words.append(clean_test_string(pending[0]))
    while len(words) < session.max_test_strings:
        line = _read()
        if line is None:
            return words
        word = clean_test_string(line)
        if word == session.sentinel:
            return words
        words.append(word)
    print(session.sentinel)
    return words


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dfa-sim",
        description="Enter a DFA interactively, then test strings against it.")
    p.add_argument("--sentinel", default=SENTINEL,
                   help=f"Line that ends the test strings (default '{SENTINEL}').")
    p.add_argument("--max-strings", type=int, default=20,
                   help="Maximum number of test strings (default 20).")
    p.add_argument("--dot", action="store_true", help="Also print the automaton as DOT.")
    p.add_argument("--plot", action="store_true",
                   help="Show the transition matrix and results with matplotlib.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    session = Session(sentinel=args.sentinel, max_test_strings=args.max_strings)

    print("DFA Simulator")
    print("Enter number of states:")
    try:
        count = parse_state_count(_read() or "")
    except FrontEndError as e:
        print(e)
        return 1
    states = StateSet(count)

    print("Enter final states:")
    finals, problems = parse_final_states(_read() or "", count)
    _print_all(problems)
    for s in finals:
        states.mark_final(s)

    print("Enter alphabet (may include 'letters', 'numbers', and/or ranges i.e. '2-7', 'a-z', 'G-M'):")
    dfa = DFA(parse_alphabet(_read() or ""), states)

    print("Enter transitions in the format 'p a q' first "
          "(may also put 'letters', 'numbers', or ranges for the symbol)")
    print(f"Then up to {session.max_test_strings} test strings "
          f"(enter '{session.sentinel}' to finish): ")
    pending = read_transitions(dfa)
    words = read_test_strings(pending, session)
    results = dfa.run_batch(words, sentinel=session.sentinel)

    print()
    _print_all(format_report(dfa, words, results))
    print()
    print(session.sentinel)

    if args.dot:
        print(dfa.to_dot())
    if args.plot:
        from .plotter import plot_results, plot_transition_matrix
        plot_transition_matrix(dfa, show=True)
        if words:
            plot_results(words, results, show=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
