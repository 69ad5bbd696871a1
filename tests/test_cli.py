from pathlib import Path

from nav_metrics import cli
from nav_metrics.domain.errors import SchemeSourceError


class FailingCatalog:
    def list_schemes(self):
        raise SchemeSourceError("unreachable")

    def get_scheme_detail(self, scheme_code):
        raise SchemeSourceError("unreachable")


def test_file_command(tmp_path: Path, capsys):
    path = tmp_path / "fund.csv"
    path.write_text("date,nav\n2024-06-28,110\n2024-06-27,108\n2024-06-26,105\n2024-06-25,102\n2024-06-24,100\n")

    exit_code = cli.main(["--benchmarks", str(tmp_path / "none.json"), "file", str(path), "--category", "Equity Scheme - Mid Cap Fund"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Benchmark category: Mid Cap" in out
    assert "10.00" in out


def test_analyze_reports_failure(monkeypatch, tmp_path: Path, capsys):
    monkeypatch.setattr(cli, "MfApiSchemeRepository", lambda *args, **kwargs: FailingCatalog())

    exit_code = cli.main(["--benchmarks", str(tmp_path / "none.json"), "analyze", "100027"])

    assert exit_code == 1
    assert "no data available" in capsys.readouterr().out


def test_list_reports_empty(monkeypatch, tmp_path: Path, capsys):
    monkeypatch.setattr(cli, "MfApiSchemeRepository", lambda *args, **kwargs: FailingCatalog())

    assert cli.main(["list"]) == 1
    assert "No schemes available." in capsys.readouterr().out


def test_file_command_reports_unreadable_files(tmp_path: Path, capsys):
    empty = tmp_path / "empty.csv"
    empty.write_text("")
    wrong_columns = tmp_path / "wrong.csv"
    wrong_columns.write_text("when,value\n2024-06-28,1\n")
    benchmarks = str(tmp_path / "none.json")

    for path in (tmp_path / "absent.csv", empty, wrong_columns):
        assert cli.main(["--benchmarks", benchmarks, "file", str(path)]) == 1
        assert "no data available" in capsys.readouterr().out
