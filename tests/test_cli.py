from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from domain_scoring.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


def test_score(runner):
    result = runner.invoke(cli, ["score", "rocket.com"], obj={})
    assert result.exit_code == 0, result.output
    assert "rocket.com" in result.output
    assert "Summary" in result.output
    assert "Estimated value" in result.output
    assert "Trend:" in result.output


def test_score_requires_a_domain(runner):
    result = runner.invoke(cli, ["score"], obj={})
    assert result.exit_code != 0


def test_score_with_extra_brands(runner, config_file):
    config = config_file("trademark:\n  extra_brands: [zentrova]\n")
    result = runner.invoke(cli, ["--config", config, "score", "zentrova.com"], obj={})
    assert result.exit_code == 0, result.output
    assert "high" in result.output


def test_bulk_exports_ranked_tsv(runner, tmp_path):
    input_file = tmp_path / "domains.txt"
    input_file.write_text("# candidates\nxkqzwp.info\nrocket.com\n\n", encoding="utf-8")
    output = tmp_path / "out.tsv"

    result = runner.invoke(cli, ["bulk", str(input_file), "--output", str(output)], obj={})
    assert result.exit_code == 0, result.output

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("domain\tbrandability")
    assert [line.split("\t")[0] for line in lines[1:]] == ["rocket.com", "xkqzwp.info"]


def test_bulk_limit(runner, tmp_path):
    input_file = tmp_path / "domains.txt"
    input_file.write_text("rocket.com\ncloudbank.com\nsmartpay.com\n", encoding="utf-8")
    output = tmp_path / "out.tsv"

    result = runner.invoke(cli, ["bulk", str(input_file), "-l", "2", "-o", str(output)], obj={})
    assert result.exit_code == 0, result.output
    assert len(output.read_text(encoding="utf-8").splitlines()) == 3


def test_bulk_empty_file(runner, tmp_path):
    input_file = tmp_path / "domains.txt"
    input_file.write_text("# nothing here\n", encoding="utf-8")
    result = runner.invoke(cli, ["bulk", str(input_file)], obj={})
    assert result.exit_code == 0
    assert "No domains found" in result.output


def test_value_without_comps(runner):
    result = runner.invoke(cli, ["value", "cloudbank.com"], obj={})
    assert result.exit_code == 0, result.output
    assert "cloudbank.com" in result.output
    assert "Comp-anchored" not in result.output


def test_value_with_comps(runner, tmp_path):
    comps = tmp_path / "comps.yaml"
    comps.write_text(
        "sales:\n"
        "  - {domain_name: cloudpay.com, sale_price: 40000, sale_date: '2025-06-01'}\n"
        "  - {domain_name: cloudbase.com, sale_price: 35000, sale_date: '2025-03-01'}\n"
        "  - {domain_name: bankcloud.com, sale_price: 50000, venue: end-user}\n",
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["value", "cloudbank.com", "--comps", str(comps)], obj={})
    assert result.exit_code == 0, result.output
    assert "Comp-anchored" in result.output


def test_value_with_unusable_comps(runner, tmp_path):
    comps = tmp_path / "comps.yaml"
    comps.write_text("not a list\n", encoding="utf-8")
    result = runner.invoke(cli, ["value", "cloudbank.com", "--comps", str(comps)], obj={})
    assert result.exit_code == 0
    assert "Could not load comparable sales" in result.output


def test_value_with_scalar_comps(runner, tmp_path):
    comps = tmp_path / "comps.yaml"
    comps.write_text("- 5\n- 7\n", encoding="utf-8")
    result = runner.invoke(cli, ["value", "cloudbank.com", "--comps", str(comps)], obj={})
    assert result.exit_code == 0, result.output
    assert "Could not load comparable sales" in result.output


def test_compare(runner):
    result = runner.invoke(cli, ["compare", "cashflow.com", "bankpay.com"], obj={})
    assert result.exit_code == 0, result.output
    assert "Semantic similarity" in result.output
    assert "finance" in result.output


def test_trends_without_source(runner, config_file):
    config = config_file("trends:\n  source: none\n")
    result = runner.invoke(cli, ["--config", config, "trends"], obj={})
    assert result.exit_code == 0
    assert "No trend source configured" in result.output


def test_trends_from_file(runner, config_file, tmp_path, snapshot_row):
    snapshot = tmp_path / "trends.json"
    snapshot.write_text(json.dumps(snapshot_row), encoding="utf-8")
    config = config_file(f"trends:\n  source: file\n  file_path: {snapshot}\n")

    result = runner.invoke(cli, ["--config", config, "trends"], obj={})
    assert result.exit_code == 0, result.output
    assert "agent" in result.output
    assert "AI / Tech" in result.output


def test_trends_unreadable_file(runner, config_file, tmp_path):
    config = config_file(f"trends:\n  source: file\n  file_path: {tmp_path / 'missing.json'}\n")
    result = runner.invoke(cli, ["--config", config, "trends"], obj={})
    assert result.exit_code == 0
    assert "Trend data unavailable" in result.output
