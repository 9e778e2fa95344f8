"""Data-driven test suite for the demo option table.

Reads test cases from test_cases.txt, runs each command line through
parse_cmd_line with a fresh Settings, and checks the return value, the
resulting settings, and what was printed.

See test_cases.txt for the format specification.
"""

import dataclasses
from pathlib import Path

import pytest

from argmatch.demo import Settings, build_options
from argmatch.options import parse_cmd_line

_DEFAULTS = dataclasses.asdict(Settings())


def _parse_value(s):
    """Parse a string value into the appropriate Python type."""
    if s == "true":
        return True
    if s == "false":
        return False
    try:
        if "." in s:
            return float(s)
        if s.lstrip("-").isdigit():
            return int(s)
    except ValueError:
        pass
    return s


def _load_test_cases():
    """Load test cases from test_cases.txt."""
    path = Path(__file__).parent / "test_cases.txt"
    cases = []
    current = None

    for line_num, line in enumerate(path.read_text().splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped == ">" or stripped.startswith("> "):
            if current:
                cases.append(current)
            current = {
                "input": stripped[2:].split(),
                "result": None,
                "usage": None,
                "errors": [],
                "fields": {},
                "line": line_num,
            }
            continue

        if current is None:
            continue

        key, _, value = stripped.partition(":")
        key = key.strip()
        value = value.strip()

        if key == "result":
            current["result"] = _parse_value(value)
        elif key == "usage":
            current["usage"] = _parse_value(value)
        elif key == "error":
            current["errors"].append(value)
        else:
            assert key in _DEFAULTS, f"test_cases.txt:{line_num}: unknown field {key!r}"
            current["fields"][key] = _parse_value(value)

    if current:
        cases.append(current)

    return cases


_CASES = _load_test_cases()


def _case_id(case):
    return " ".join(case["input"]) or "(no args)"


@pytest.mark.parametrize("case", _CASES, ids=[_case_id(c) for c in _CASES])
def test_parse(case, capsys):
    settings = Settings()
    ok = parse_cmd_line(case["input"], build_options(settings), prog="demo")
    out, err = capsys.readouterr()
    where = f"\n  Input:    {case['input']!r} (test_cases.txt:{case['line']})"

    assert ok == case["result"], (
        f"{where}"
        f"\n  Expected: result={case['result']}"
        f"\n  Got:      result={ok}"
        f"\n  stderr:   {err!r}"
    )

    expected_usage = case["usage"] if case["usage"] is not None else not case["result"]
    if expected_usage:
        assert out.startswith("Usage: demo\n"), f"{where}\n  stdout: {out!r}"
        assert out.count("Usage: ") == 1, f"{where}\n  usage printed more than once"
    else:
        assert "Usage: " not in out, f"{where}\n  unexpected usage: {out!r}"

    expected_err = "".join(f"Unrecognised option: {t}\n" for t in case["errors"])
    assert err == expected_err, (
        f"{where}"
        f"\n  Expected stderr: {expected_err!r}"
        f"\n  Got stderr:      {err!r}"
    )

    # Every field not mentioned in the case must keep its default
    expected = dict(_DEFAULTS, **case["fields"])
    actual = dataclasses.asdict(settings)
    assert actual == expected, (
        f"{where}"
        f"\n  Expected: {expected}"
        f"\n  Got:      {actual}"
    )
