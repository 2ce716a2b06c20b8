"""Unit tests for the fiqhqa CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from fiqhqa.presentation.cli.app import app

runner = CliRunner()


class TestSecretsCommand:
    def test_generate_prints_jwt_secret(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output

    def test_generated_secrets_differ(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestServeCommand:
    def test_serve_uses_settings_defaults(self):
        with patch("fiqhqa.presentation.cli.app.uvicorn.run") as run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("fiqhqa.presentation.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 8080

    def test_serve_options_override_settings(self):
        with patch("fiqhqa.presentation.cli.app.uvicorn.run") as run:
            result = runner.invoke(
                app,
                ["serve", "--host", "127.0.0.1", "--port", "9001"],
            )

        assert result.exit_code == 0
        kwargs = run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9001


class TestDbInitCommand:
    def test_creates_sqlite_schema(self, monkeypatch, tmp_path):
        db_file = tmp_path / "nested" / "cli.db"
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")

        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0, result.output
        assert "up to date" in result.output
        assert db_file.exists()

    def test_is_idempotent(self, monkeypatch, tmp_path):
        db_file = tmp_path / "cli.db"
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")

        assert runner.invoke(app, ["db", "init"]).exit_code == 0
        assert runner.invoke(app, ["db", "init"]).exit_code == 0
