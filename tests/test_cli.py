"""Tests for greeter.cli: CLI entrypoint, routes listing, and one-shot calls."""

import json
import sys
from pathlib import Path

import pytest

from greeter.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: greeter" in capsys.readouterr().out

    @pytest.mark.parametrize("command", ["run", "routes", "call"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_call_missing_target(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "GET"])
        assert exc_info.value.code == 2

    def test_run_bad_port(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--port", "abc"])
        assert exc_info.value.code == 2


class TestRoutes:
    def test_lists_service_routes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "greeter.service:create_app"])
        out = capsys.readouterr().out
        lines = out.splitlines()

        assert lines[0].split() == ["METHOD", "PATH", "HANDLER"]
        assert any("/hello" in line and "hello (hello)" in line for line in lines)
        assert any("/api/status" in line and "status (status)" in line for line in lines)

    def test_unresolvable_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "nonexistent_module_xyz:app"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_bad_environment(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (tmp_path / "_env_built_app.py").write_text(
            "from greeter.config import AppConfig\n"
            "from greeter.service import create_app\n"
            "app = create_app(AppConfig.from_env())\n"
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "_env_built_app", raising=False)
        monkeypatch.setenv("GREETER_PORT", "eighty")

        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_env_built_app:app"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == "Error: GREETER_PORT='eighty' is not an integer\n"


class TestCall:
    def test_hello(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "GET", "/hello?name=Ada", "greeter.service:create_app"])
        status_line, body = capsys.readouterr().out.splitlines()

        assert status_line == "200"
        assert json.loads(body)["message"] == "Hello, Ada!"

    def test_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "get", "/api/status", "greeter.service:create_app"])
        _, body = capsys.readouterr().out.splitlines()

        assert json.loads(body)["status"] == "healthy"

    def test_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "POST", "/hello", "greeter.service:create_app"])
        assert exc_info.value.code == 1

        status_line, body = capsys.readouterr().out.splitlines()
        assert status_line == "405"
        assert json.loads(body) == {"error": "Method Not Allowed", "code": 405}
