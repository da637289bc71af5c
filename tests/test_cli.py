"""
Tests for the command line interface.
"""

import json

import pytest

from indexengine.cli import build_parser, main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)


class TestCli:
    """Tests for cli.main."""

    def test_templates(self, capsys):
        assert main(["templates"]) == 0
        out = capsys.readouterr().out
        assert "SPX" in out
        assert "NIFTY" in out

    def test_project_json(self, capsys):
        assert main(["project", "SPX", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["thirtyDayMove"] > 0
        assert [t["tenor"] for t in data["futuresTargets"]] == ["1M", "3M", "6M", "12M"]
        assert [s["label"] for s in data["optionSuggestions"]] == ["Conservative", "Balanced", "Aggressive"]

    def test_project_overrides(self, capsys):
        assert main([
            "project", "spx", "--level", "4500", "--vol", "0.25",
            "--momentum", "0.1", "--risk", "aggressive", "--json"
        ]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["annualizedDrift"] == pytest.approx(0.15)
        assert data["callTarget"] > 4500 > data["putTarget"]

    def test_project_default_template(self, capsys):
        assert main(["project"]) == 0
        out = capsys.readouterr().out
        assert "Futures Targets" in out
        assert "Technical Anchors" in out

    def test_unknown_template(self, capsys):
        assert main(["project", "XYZ"]) == 2
        assert "Unknown template" in capsys.readouterr().out

    def test_invalid_input(self, capsys):
        assert main(["project", "SPX", "--level", "-1"]) == 2
        assert "index_level" in capsys.readouterr().out

    def test_status(self, capsys):
        assert main(["status"]) == 0
        assert "Drift Multipliers" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_rejects_unknown_risk(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["project", "SPX", "--risk", "yolo"])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
