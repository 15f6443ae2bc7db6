"""
Tests for the roster command line
"""

from click.testing import CliRunner

from roster import __version__
from roster.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_schema_stdout():
    result = CliRunner().invoke(cli, ["export-schema"])

    assert result.exit_code == 0, result.output
    assert "type Query" in result.output
    assert "interface MutationResponse" in result.output


def test_export_schema_to_file(tmp_path):
    target = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["export-schema", "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert "deleteUser(id: ID!): DeleteUserMutationResponse" in target.read_text()


def test_serve_passes_options_to_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("roster.cli.uvicorn.run", fake_run)

    result = CliRunner().invoke(cli, ["serve", "--port", "5055", "--reload"])

    assert result.exit_code == 0, result.output
    assert calls["app"] == "roster.api.app:app"
    assert calls["port"] == 5055
    assert calls["reload"] is True


def test_serve_log_level_survives_app_import(monkeypatch):
    levels = []

    monkeypatch.setattr(
        "roster.cli.configure_logging",
        lambda debug=False, level=None: levels.append((debug, level)),
    )
    monkeypatch.setattr("roster.cli.uvicorn.run", lambda app, **kwargs: None)

    result = CliRunner().invoke(cli, ["serve", "--log-level", "warning"])

    assert result.exit_code == 0, result.output
    assert levels == [(False, "warning"), (False, "warning")]
