"""
Tests for the ``piiscan rules`` command and CLI output formatting.
"""

import json

import pytest
from click.testing import CliRunner

from piiscan.__main__ import cli
from piiscan.cli.output import MAX_COLUMN_WIDTH, OutputFormatter


@pytest.fixture
def runner():
    return CliRunner()


class TestRulesCommand:
    def test_json_lists_families_in_rank_order(self, runner):
        result = runner.invoke(cli, ["rules", "--format", "json"])
        assert result.exit_code == 0
        families = json.loads(result.output)
        assert len(families) == 17
        assert [f["rank"] for f in families] == list(range(17))
        assert families[0] == {"rank": 0, "family": "secrets", "entity_type": "SECRET",
                               "rules": families[0]["rules"]}
        assert families[-1]["family"] == "person"

    def test_verbose_lists_rules(self, runner):
        result = runner.invoke(cli, ["rules", "-v", "--format", "json"])
        assert result.exit_code == 0
        rules = json.loads(result.output)
        names = {r["name"] for r in rules}
        assert {"iban", "iban_labelled", "card_visa", "amount_bare", "person_titled"} <= names
        bare = next(r for r in rules if r["name"] == "amount_bare")
        assert bare["context_validator"] == "financial_context"
        assert bare["family"] == "financial"

    def test_table(self, runner):
        result = runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0].split() == ["Rank", "Family", "Entity", "Type", "Rules"]
        assert "credit-card" in result.output

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
        result = runner.invoke(cli, ["rules", "--catalog", str(catalog), "-f", "csv"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["rank,family,entity_type,rules", "0,tickets,ID_NUMBER,1"]

    def test_bad_catalog(self, runner, tmp_path):
        catalog = tmp_path / "rules.yaml"
        catalog.write_text("rules: []\n", encoding="utf-8")
        result = runner.invoke(cli, ["rules", "--catalog", str(catalog)])
        assert result.exit_code == 1
        assert "families" in result.output


class TestOutputFormatter:
    def test_json_keeps_unicode(self, capsys):
        OutputFormatter("json").print_table([{"text": "Müller"}], columns=["text"])
        assert '"Müller"' in capsys.readouterr().out

    def test_empty_table_prints_header(self, capsys):
        OutputFormatter("table").print_table([], columns=["entity_type", "start"])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["Entity", "Type", "Start"]

    def test_long_cells_truncated(self, capsys):
        OutputFormatter("table").print_table([{"text": "x" * 80}], columns=["text"])
        row = capsys.readouterr().out.splitlines()[2]
        assert len(row) == MAX_COLUMN_WIDTH
        assert row.endswith("...")

    def test_newlines_escaped(self, capsys):
        OutputFormatter("table").print_table([{"text": "Bill to:\nJane"}], columns=["text"])
        assert "Bill to:\\nJane" in capsys.readouterr().out

    def test_quiet_suppresses_messages(self, capsys):
        OutputFormatter(quiet=True).print_message("hidden")
        OutputFormatter().print_message("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_errors_always_printed(self, capsys):
        OutputFormatter(quiet=True).print_error("broken")
        assert "Error: broken" in capsys.readouterr().err
