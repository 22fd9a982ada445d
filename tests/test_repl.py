import logging

import pytest

from lilsp import repl
from lilsp.repl import main


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    monkeypatch.delenv("LILSP_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("LILSP_PROMPT", raising=False)
    monkeypatch.delenv("LILSP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LILSP_RECURSION_LIMIT", raising=False)


def test_repl_session(monkeypatch, capsys):
    _feed(monkeypatch, ["+ 1 2", "head {}", "(+ 1", "def {x} 5", "x", "{1 2.5}"])
    assert main() == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Lilsp Version 0.0.0.1"
    assert out[1] == "Press Ctrl+C to exit"
    results = out[3:]
    assert results[:2] == ["3", "Error: Function 'head' passed {}."]
    assert results[2].startswith("<stdin>:") and results[2].endswith("syntax error")
    assert results[3:] == ["()", "5", "{1 2.500000}", ""]


def test_repl_loads_prelude(monkeypatch, capsys, tmp_path):
    prelude = tmp_path / "prelude.lilsp"
    prelude.write_text("(def {answer} 42)\n", encoding="utf-8")
    monkeypatch.setenv("LILSP_PRELUDE_PATH", str(prelude))
    _feed(monkeypatch, ["answer"])

    assert main() == 0
    assert "42" in capsys.readouterr().out.splitlines()


def test_repl_exits_on_interrupt(monkeypatch, capsys):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    assert main() == 0


def test_repl_survives_deep_nesting(monkeypatch, capsys):
    _feed(monkeypatch, ["(" * 400 + "1" + ")" * 400, "+ 1 2"])
    assert main() == 0
    assert capsys.readouterr().out.splitlines()[3:] == ["1", "3", ""]


def test_readline_is_loaded_for_line_editing(monkeypatch, capsys):
    # Loaded wherever the platform provides it; input() then keeps history
    assert repl.readline is None or hasattr(repl.readline, "add_history")
    _feed(monkeypatch, ["list 1 2"])
    assert main() == 0
    assert "{1 2}" in capsys.readouterr().out.splitlines()


def test_missing_prelude_file_is_skipped(monkeypatch, capsys, caplog, tmp_path):
    monkeypatch.setenv("LILSP_PRELUDE_PATH", str(tmp_path / "missing.lilsp"))
    _feed(monkeypatch, ["+ 1 2"])
    with caplog.at_level(logging.WARNING, logger="lilsp.repl"):
        assert main() == 0
    assert "Prelude not loaded" in caplog.text
    assert "3" in capsys.readouterr().out.splitlines()


def test_prelude_with_syntax_error_is_skipped(monkeypatch, capsys, caplog, tmp_path):
    prelude = tmp_path / "broken.lilsp"
    prelude.write_text("(def {answer} 42\n", encoding="utf-8")
    monkeypatch.setenv("LILSP_PRELUDE_PATH", str(prelude))
    _feed(monkeypatch, ["+ 1 2"])
    with caplog.at_level(logging.WARNING, logger="lilsp.interpreter"):
        assert main() == 0
    assert "Prelude not loaded" in caplog.text
    assert "3" in capsys.readouterr().out.splitlines()
