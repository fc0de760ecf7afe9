import json

from typer.testing import CliRunner

from thenette import __version__
from thenette.cli import app

runner = CliRunner()


def test_check_passes():
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0, result.output
    assert "scenarios passed" in result.output


def test_check_json_filter():
    result = runner.invoke(app, ["check", "--only", "static", "--json"])
    assert result.exit_code == 0, result.output
    lines = [json.loads(l) for l in result.output.splitlines() if l.strip()]
    assert {l["name"] for l in lines} == {"static resolve", "static reject"}
    assert all(l["passed"] for l in lines)


def test_check_unknown_filter():
    result = runner.invoke(app, ["check", "--only", "no-such-scenario"])
    assert result.exit_code == 1


def test_trace_prints_events():
    result = runner.invoke(app, ["trace", "--only", "rejects then resolves"])
    assert result.exit_code == 0, result.output
    assert "created" in result.output
    assert "recovered" in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert __version__ in result.output
