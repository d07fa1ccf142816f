from __future__ import annotations

import io

import pytest

from dfa_sim.cli import main


def run_session(monkeypatch, capsys, text: str, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv or [])
    return code, capsys.readouterr().out.splitlines()


def test_full_table_session(monkeypatch, capsys) -> None:
    text = "2\n1\na b\n0 a-b 1\n1 a-b 1\na\n\nba\nc\n.....\n"
    code, out = run_session(monkeypatch, capsys, text)

    assert code == 0
    assert "Enter test strings:" in out
    assert "number of states: 2" in out
    assert "final states: 1" in out
    assert "alphabet: a, b" in out
    assert "Simplified Table" in out
    assert "\t0 a-b 1" in out
    i = out.index("strings: ")
    assert out[i + 1:i + 5] == [
        "\ta\t\t\tAccept",
        "\t(empty)\t\t\tReject",
        "\tba\t\t\tAccept",
        "\tc\t\t\tReject",
    ]
    assert out[-1] == "....."


def test_first_non_transition_line_is_a_test_string(monkeypatch, capsys) -> None:
    text = "2\n1\na, b\n(0 a 1)\na b\n.....\n"
    code, out = run_session(monkeypatch, capsys, text)

    assert code == 0
    assert any(ln.startswith("Read as a test string") for ln in out)
    assert "Full Table" not in out
    assert "\t0 a 1" in out
    # "a b" is read as the test string "ab", which gets stuck in state 1
    assert "\tab\t\t\tReject" in out


def test_diagnostics_are_printed(monkeypatch, capsys) -> None:
    text = "2\n0 7\na\n0 z 5\n0 a-Z 1\n.....\n"
    code, out = run_session(monkeypatch, capsys, text)

    assert code == 0
    assert "State '7' does not exist" in out
    assert "Symbol 'z' does not exist" in out
    assert "State '5' does not exist" in out
    assert "Range not accepted" in out
    assert "final states: 0" in out
    assert "\tNo transitions" in out
    assert "\tNo strings to test" in out


def test_max_strings_and_custom_sentinel(monkeypatch, capsys) -> None:
    text = "1\n0\n0\n0 0 0\n0\n00\n000\n"
    code, out = run_session(monkeypatch, capsys, text, ["--max-strings", "2", "--sentinel", "END"])

    assert code == 0
    i = out.index("strings: ")
    assert out[i + 1:] == ["\t0\t\t\tAccept", "\t00\t\t\tAccept", "", "END"]


def test_bad_state_count(monkeypatch, capsys) -> None:
    code, out = run_session(monkeypatch, capsys, "two\n")
    assert code == 1
    assert out[-1] == "You must enter an integer"


def test_eof_ends_session(monkeypatch, capsys) -> None:
    code, out = run_session(monkeypatch, capsys, "1\n0\na\n")
    assert code == 0
    assert "\tNo strings to test" in out


def test_dot_output(monkeypatch, capsys) -> None:
    pytest.importorskip("pydot")
    code, out = run_session(monkeypatch, capsys, "1\n0\na\n0 a 0\n.....\n", ["--dot"])
    assert code == 0
    assert any("digraph" in ln for ln in out)
