"""
Tests for scripts/summarize_transactions.py.
"""
import importlib
import json
import os
import sys

import pytest

SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts")


@pytest.fixture
def script(monkeypatch):
    monkeypatch.syspath_prepend(SCRIPTS_DIR)
    return importlib.import_module("summarize_transactions")


def _run(script, monkeypatch, tmp_path, payload, *flags):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(payload))
    monkeypatch.setattr(sys, "argv", ["summarize_transactions.py", str(path), *flags])
    script.main()


def test_groups_are_printed(script, monkeypatch, tmp_path, capsys):
    payload = [
        {"type": "deposit", "amount": 100, "date": "2024-01-05"},
        {"type": "withdrawal", "amount": "20.5", "date": "2024-03-01"},
    ]
    _run(script, monkeypatch, tmp_path, payload, "--json")
    output = json.loads(capsys.readouterr().out)
    assert [(g["year"], g["month"]) for g in output] == [(2024, 3), (2024, 1)]


@pytest.mark.parametrize("payload", [
    [{"type": "deposit", "amount": "lots", "date": "2024-01-05"}],
    ["not-an-object"],
    {"transactions": "nope"},
])
def test_bad_records_exit_with_error_message(script, monkeypatch, tmp_path, capsys, payload):
    with pytest.raises(SystemExit) as exc_info:
        _run(script, monkeypatch, tmp_path, payload)
    assert exc_info.value.code == 1
    assert capsys.readouterr().out.startswith("Error: Invalid transactions")


def test_malformed_date_exits_with_error_message(script, monkeypatch, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        _run(script, monkeypatch, tmp_path, [{"type": "deposit", "amount": 1, "date": "not-a-date"}])
    assert exc_info.value.code == 2
    assert capsys.readouterr().out.startswith("Error:")
