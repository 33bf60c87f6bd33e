"""
Tests for the command line interface.
"""
import json

import pytest
from click.testing import CliRunner

from citedby.cli import cli
from citedby.services import CALIBRATION_BUSINESSES


def test_score_command(tmp_path, kpmg_response):
    response_file = tmp_path / "response.txt"
    response_file.write_text(kpmg_response, encoding="utf-8")

    result = CliRunner().invoke(cli, ["score", str(response_file), "--name", "KPMG AG", "--city", "Zürich"])

    assert result.exit_code == 0, result.output
    assert "100/100" in result.output
    assert "EXCELLENT" in result.output


def test_score_command_reads_stdin():
    result = CliRunner().invoke(
        cli,
        ["score", "-", "--name", "Hartmann Notar", "-t", "direct_query"],
        input="Many notaries work in Aarau.",
    )
    assert result.exit_code == 0, result.output
    assert "0/100" in result.output


def test_calibrate_passes_with_good_responses(tmp_path, simulated_responses):
    responses_file = tmp_path / "responses.json"
    responses_file.write_text(json.dumps(simulated_responses), encoding="utf-8")
    output = tmp_path / "results.csv"

    result = CliRunner().invoke(cli, ["calibrate", "--responses", str(responses_file), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "accuracy" in result.output
    assert output.exists()
    assert len(output.read_text(encoding="utf-8").splitlines()) == len(CALIBRATION_BUSINESSES) + 1


def test_calibrate_fails_below_accuracy_threshold(tmp_path):
    empty = {b.name: {"local_search": "", "direct_query": ""} for b in CALIBRATION_BUSINESSES}
    responses_file = tmp_path / "responses.json"
    responses_file.write_text(json.dumps(empty), encoding="utf-8")

    result = CliRunner().invoke(
        cli, ["calibrate", "--responses", str(responses_file), "--output", str(tmp_path / "out.csv")]
    )

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_calibrate_requires_a_response_source():
    result = CliRunner().invoke(cli, ["calibrate"])
    assert result.exit_code == 2
    assert "--responses or --live" in result.output


def test_calibrate_rejects_invalid_json(tmp_path):
    responses_file = tmp_path / "responses.json"
    responses_file.write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(cli, ["calibrate", "--responses", str(responses_file)])

    assert result.exit_code == 1
    assert "not valid JSON" in " ".join(result.output.split())


@pytest.mark.parametrize("recorded", [
    ["KPMG AG"],
    {"KPMG AG": "just a string"},
    {"KPMG AG": {"local_search": 42, "direct_query": ""}},
])
def test_calibrate_rejects_wrongly_shaped_responses(tmp_path, recorded):
    responses_file = tmp_path / "responses.json"
    responses_file.write_text(json.dumps(recorded), encoding="utf-8")

    result = CliRunner().invoke(cli, ["calibrate", "--responses", str(responses_file)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "must map business names" in " ".join(result.output.split())
