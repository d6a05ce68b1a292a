"""
Tests for the ``piiscan scan`` command.
"""

import csv
import io
import json
import warnings

import pytest
from click.testing import CliRunner

from piiscan.__main__ import cli


DOCUMENT = (
    "Bitte Zahlung auf AT611904300234573201 bis 12.03.2026, "
    "Betrag 1.250,00 EUR an Herr Max Mustermann senden."
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "invoice.txt"
    path.write_text(DOCUMENT, encoding="utf-8")
    return path


def _json_spans(result):
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestScanInput:
    def test_stdin(self, runner):
        result = runner.invoke(cli, ["scan", "--format", "json", "--quiet"], input=DOCUMENT)
        spans = _json_spans(result)
        assert [s["entity_type"] for s in spans] == ["IBAN", "DATE", "FINANCIAL", "PERSON"]

    def test_dash_reads_stdin(self, runner):
        result = runner.invoke(cli, ["scan", "-", "-f", "json", "-q"], input=DOCUMENT)
        assert len(_json_spans(result)) == 4

    def test_file(self, runner, document_file):
        result = runner.invoke(cli, ["scan", str(document_file), "--format", "json", "--quiet"])
        spans = _json_spans(result)
        assert spans[0] == {
            "entity_type": "IBAN", "start": 18, "end": 38,
            "text": "AT611904300234573201", "score": 0.99,
        }

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["scan", str(tmp_path / "absent.txt")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_not_utf8(self, runner, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("Größe".encode("latin-1"))
        result = runner.invoke(cli, ["scan", str(path)])
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_empty_input(self, runner):
        result = runner.invoke(cli, ["scan", "--format", "json", "--quiet"], input="")
        assert _json_spans(result) == []

    def test_stdin_read_without_deprecation_warnings(self, runner):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = runner.invoke(cli, ["scan", "-f", "json", "-q"], input=DOCUMENT)
        assert len(_json_spans(result)) == 4
        assert not [
            w for w in caught
            if issubclass(w.category, DeprecationWarning) and "piiscan" in w.filename
        ]


class TestScanOptions:
    def test_types(self, runner):
        result = runner.invoke(cli, ["scan", "-t", "iban,date", "-f", "json", "-q"], input=DOCUMENT)
        assert [s["entity_type"] for s in _json_spans(result)] == ["IBAN", "DATE"]

    def test_exclude(self, runner):
        result = runner.invoke(cli, ["scan", "-x", "PERSON", "-f", "json", "-q"], input=DOCUMENT)
        assert "PERSON" not in [s["entity_type"] for s in _json_spans(result)]

    def test_min_score(self, runner):
        result = runner.invoke(cli, ["scan", "--min-score", "0.9", "-f", "json", "-q"], input=DOCUMENT)
        assert "FINANCIAL" not in [s["entity_type"] for s in _json_spans(result)]

    def test_min_score_out_of_range(self, runner):
        result = runner.invoke(cli, ["scan", "--min-score", "2"], input=DOCUMENT)
        assert result.exit_code == 2

    def test_unknown_type(self, runner):
        result = runner.invoke(cli, ["scan", "-t", "TELEPATHY"], input=DOCUMENT)
        assert result.exit_code == 1
        assert "Unknown entity type" in result.output

    def test_sequential_same_result(self, runner):
        parallel = runner.invoke(cli, ["scan", "-f", "json", "-q"], input=DOCUMENT)
        sequential = runner.invoke(cli, ["scan", "--sequential", "-f", "json", "-q"], input=DOCUMENT)
        assert _json_spans(parallel) == _json_spans(sequential)

    def test_settings_file_applies(self, runner, tmp_path):
        (tmp_path / "piiscan.yaml").write_text(
            "detection:\n  exclude_types: [DATE]\n", encoding="utf-8",
        )
        result = runner.invoke(cli, ["scan", "-f", "json", "-q"], input=DOCUMENT)
        assert "DATE" not in [s["entity_type"] for s in _json_spans(result)]


class TestScanFormats:
    def test_csv(self, runner):
        result = runner.invoke(cli, ["scan", "-f", "csv", "-q"], input=DOCUMENT)
        assert result.exit_code == 0
        rows = list(csv.DictReader(io.StringIO(result.output)))
        assert rows[0]["entity_type"] == "IBAN"
        assert rows[-1]["text"] == "Max Mustermann"

    def test_table(self, runner):
        result = runner.invoke(cli, ["scan", "-q"], input=DOCUMENT)
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["Entity", "Type", "Start", "End", "Score", "Text"]
        assert "AT611904300234573201" in result.output
        assert "0.99" in result.output

    def test_summary_message(self, runner):
        result = runner.invoke(cli, ["scan", "-f", "json"], input=DOCUMENT)
        assert result.exit_code == 0
        assert "4 spans" in result.output


class TestScanCatalog:
    def test_custom_catalog(self, runner, tmp_path):
        catalog = tmp_path / "rules.yaml"
        catalog.write_text(
            "families:\n"
            "  - name: tickets\n"
            "    entity_type: ID_NUMBER\n"
            "    rules:\n"
            "      - pattern: 'TCK-\\d{6}'\n"
            "        score: 0.9\n",
            encoding="utf-8",
        )
        result = runner.invoke(
            cli, ["scan", "--catalog", str(catalog), "-f", "json", "-q"],
            input="Ticket TCK-123456 an Herr Max Mustermann",
        )
        spans = _json_spans(result)
        assert spans == [{
            "entity_type": "ID_NUMBER", "start": 7, "end": 17, "text": "TCK-123456", "score": 0.9,
        }]

    def test_bad_catalog(self, runner, tmp_path):
        catalog = tmp_path / "rules.yaml"
        catalog.write_text("families: [unclosed", encoding="utf-8")
        result = runner.invoke(cli, ["scan", "--catalog", str(catalog)], input=DOCUMENT)
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_rule_in_catalog(self, runner, tmp_path):
        catalog = tmp_path / "rules.yaml"
        catalog.write_text(
            "families:\n"
            "  - name: broken\n"
            "    entity_type: EMAIL\n"
            "    rules:\n"
            "      - pattern: '(unclosed'\n"
            "        score: 0.5\n",
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["scan", "--catalog", str(catalog)], input=DOCUMENT)
        assert result.exit_code == 1
        assert "Invalid regular expression" in result.output
