"""
CLI Tests
"""
import json

from deformity_planner import cli
from deformity_planner.config.settings import settings


def test_cli_text_output(capsys):
    code = cli.main(["--mpta", "84", "--ldfa", "90", "--jlca", "4"])

    out = capsys.readouterr().out
    assert code == cli.EXIT_OK
    assert "=> Gray zone: PUC vs Osteotomy (discussion)" in out


def test_cli_demo_json_french(capsys):
    code = cli.main(["--demo", "--lang", "fr", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == cli.EXIT_OK
    assert payload["language"] == "fr"
    assert payload["decision"] == "gray_zone"
    assert payload["inputs"] == {"mpta": 84.0, "ldfa": 90.0, "jlca": 4.0}


def test_cli_missing_value(capsys):
    code = cli.main(["--ldfa", "90", "--jlca", "4"])

    assert code == cli.EXIT_INVALID_INPUT
    assert "Please enter MPTA, LDFA and JLCA" in capsys.readouterr().err


def test_cli_negative_jlca(capsys):
    code = cli.main(["--mpta", "84", "--ldfa", "90", "--jlca", "-2"])

    assert code == cli.EXIT_INVALID_INPUT
    assert "JLCA cannot be negative" in capsys.readouterr().err


def test_cli_save(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(settings, "REPORTS_DIR", tmp_path / "reports")

    code = cli.main(["--mpta", "80", "--ldfa", "95", "--jlca", "0", "--save"])

    assert code == cli.EXIT_OK
    saved = list((tmp_path / "reports").glob("deformity_*.json"))
    assert len(saved) == 1
    assert json.loads(saved[0].read_text(encoding="utf-8"))["decision"] == "dlo"
