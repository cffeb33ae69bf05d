"""命令行入口测试"""
import pandas as pd
import pytest

import main
from main import handle_command, run_single, REPL_HELP
from session import CalculatorSession


def test_single_expression(capsys):
    assert main.main(["--expression", "2^3^2"]) == 0
    assert capsys.readouterr().out.strip() == "512"


def test_single_expression_error(capsys):
    assert main.main(["--expression", "fact(-1)"]) == 1
    assert capsys.readouterr().out.strip() == "Error: InvalidFactorial"


def test_single_expression_radians(capsys):
    assert main.main(["--expression", "sin(0)", "--angle_mode", "rad"]) == 0
    assert capsys.readouterr().out.strip() == "0"


def test_run_single_writes_to_stream(tmp_path):
    path = tmp_path / "out.txt"
    with open(path, "w") as f:
        assert run_single("3+4*sin(90)", "deg", out=f) == 0
    assert path.read_text().strip() == "7"


def test_batch_mode(tmp_path):
    batch_path = tmp_path / "in.csv"
    batch_path.write_text("expression\n1+1\n2*3\n")
    output_path = tmp_path / "out.csv"
    assert main.main(["--batch_path", str(batch_path), "--output_path", str(output_path)]) == 0
    saved = pd.read_csv(output_path)
    assert saved["value"].tolist() == [2.0, 6.0]


def test_batch_mode_reports_failures(tmp_path):
    batch_path = tmp_path / "in.csv"
    batch_path.write_text("expression\n1+1\nfoo(1)\n")
    output_path = tmp_path / "out.csv"
    assert main.main(["--batch_path", str(batch_path), "--output_path", str(output_path)]) == 1


class TestRepl:

    @pytest.fixture
    def session(self):
        return CalculatorSession(angle_mode='deg')

    def test_evaluate_and_history(self, session):
        assert handle_command(session, "2+3") == "= 5"
        assert handle_command(session, "fact(-1)") == "Error: InvalidFactorial"
        assert handle_command(session, ":history") == "2+3 = 5"
        assert handle_command(session, ":clear") == "(history cleared)"
        assert handle_command(session, ":history") == "(empty)"

    def test_angle_mode_commands(self, session):
        assert handle_command(session, ":rad") == "RAD"
        assert handle_command(session, ":mode") == "RAD"
        assert handle_command(session, "cos(0)") == "= 1"
        assert handle_command(session, ":deg") == "DEG"

    def test_percent_and_memory(self, session):
        assert handle_command(session, ":% 200+50") == "= 200.5"
        assert handle_command(session, ":m+") == "M = 200.5"
        assert handle_command(session, ":m-") == "M = 0.0"
        assert handle_command(session, ":mc") == "M = 0"
        assert handle_command(session, ":mr") == "200.50"

    def test_quit_and_help(self, session):
        assert handle_command(session, "q") is None
        assert handle_command(session, "Q") is None
        assert handle_command(session, ":help") == REPL_HELP

    def test_interactive_loop(self, monkeypatch, capsys):
        lines = iter(["1+1", "", ":history", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        assert main.run_interactive("deg") == 0
        out = capsys.readouterr().out
        assert "= 2" in out
        assert "1+1 = 2" in out

    def test_interactive_loop_stops_on_eof(self, monkeypatch):
        def raise_eof(prompt=""):
            raise EOFError
        monkeypatch.setattr("builtins.input", raise_eof)
        assert main.run_interactive("rad") == 0
