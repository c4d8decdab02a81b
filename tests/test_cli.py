from __future__ import annotations

import json

from typer.testing import CliRunner

from gedcom_relations.cli import app
from gedcom_relations.utils import mock_file_path

runner = CliRunner()
FAMILY = str(mock_file_path("family.ged"))


def test_people_lists_everyone():
    result = runner.invoke(app, ["people", FAMILY])

    assert result.exit_code == 0
    for name in ("John Doe", "Jane Smith", "Mary Jones", "Owen Doe", "Ruth Doe"):
        assert name in result.output


def test_people_search_filters_names():
    result = runner.invoke(app, ["people", FAMILY, "--search", "jones"])

    assert result.exit_code == 0
    assert "Mary Jones" in result.output
    assert "John Doe" not in result.output


def test_people_search_without_matches():
    result = runner.invoke(app, ["people", FAMILY, "-s", "zzz"])

    assert result.exit_code == 0
    assert "No relatives match that search." in result.output


def test_show_person_with_relatives():
    result = runner.invoke(app, ["show", FAMILY, "@I1@"])

    assert result.exit_code == 0
    assert "John Doe" in result.output
    assert "Male" in result.output
    assert "Springfield • Capital City" in result.output
    assert "Married 1 JAN 1878" in result.output
    assert "Mary Jones" in result.output
    assert "Owen Doe" in result.output


def test_show_defaults_to_first_person():
    result = runner.invoke(app, ["show", FAMILY])

    assert result.exit_code == 0
    assert "Jane Smith" in result.output


def test_show_unknown_person_fails():
    result = runner.invoke(app, ["show", FAMILY, "@I404@"])

    assert result.exit_code == 1
    assert "No person with id @I404@" in result.output


def test_stats_counts():
    result = runner.invoke(app, ["stats", FAMILY])

    assert result.exit_code == 0
    assert "People" in result.output
    assert "Dangling references" in result.output


def test_export_to_file(tmp_path):
    out = tmp_path / "family.json"
    result = runner.invoke(app, ["export", FAMILY, "--out", str(out), "--pretty"])

    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"] == {"people": 5, "families": 2}


def test_missing_file_reports_retrieval_failure(tmp_path):
    result = runner.invoke(app, ["stats", str(tmp_path / "missing.ged")])

    assert result.exit_code == 1
    assert "Could not load family details" in result.output


def test_export_to_stdout_is_compact_json():
    result = runner.invoke(app, ["export", FAMILY])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["families"]["@F1@"]["marriage"]["date"] == "1 JAN 1878"


def test_bracketed_names_and_places_are_printed_literally(tmp_path):
    path = tmp_path / "brackets.ged"
    path.write_text(
        "0 @I1@ INDI\n"
        "1 NAME Mary [Polly] /Smith/\n"
        "1 SEX F\n"
        "1 BIRT\n"
        "2 PLAC St Ann [/old parish]\n"
        "1 FAMS @F1@\n"
        "0 @I2@ INDI\n"
        "1 NAME Tom [bold] /Brown/\n"
        "1 FAMS @F1@\n"
        "0 @F1@ FAM\n"
        "1 HUSB @I2@\n"
        "1 WIFE @I1@\n"
        "1 MARR\n"
        "2 DATE [red] 1900\n",
        encoding="utf-8",
    )

    shown = runner.invoke(app, ["show", str(path), "@I1@"])

    assert shown.exit_code == 0
    assert "Mary [Polly] Smith" in shown.output
    assert "St Ann [/old parish]" in shown.output
    assert "Tom [bold] Brown" in shown.output
    assert "Married [red] 1900" in shown.output

    listed = runner.invoke(app, ["people", str(path)])

    assert listed.exit_code == 0
    assert "Tom [bold] Brown" in listed.output
