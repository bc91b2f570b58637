"""Tests for v23_tooling.cli."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml


def _run_main(monkeypatch, argv: list[str]) -> int:
    from v23_tooling.cli.main import main

    monkeypatch.setattr(sys, "argv", ["v23", *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code


@pytest.fixture
def v23_env(monkeypatch, v23_root: Path) -> Path:
    monkeypatch.setenv("V23_ROOT", str(v23_root))
    monkeypatch.setenv("PATH", "/usr/bin")
    monkeypatch.delenv("GOPATH", raising=False)
    monkeypatch.delenv("VDLPATH", raising=False)
    return v23_root


class TestMain:
    def test_no_command_exits_1(self, monkeypatch) -> None:
        assert _run_main(monkeypatch, []) == 1

    def test_unknown_command_exits_1(self, monkeypatch, capsys) -> None:
        assert _run_main(monkeypatch, ["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().err


class TestEnvCommand:
    def test_json_names(self, monkeypatch, capsys, v23_env: Path) -> None:
        argv = ["env", "--platform", "386-nacl", "--format", "json", "GOOS", "GOPATH"]
        rc = _run_main(monkeypatch, argv)
        assert rc == 0
        out = json.loads(capsys.readouterr().out)
        assert out == {"GOOS": "nacl", "GOPATH": str(v23_env / "release" / "go")}

    def test_yaml_delta(self, monkeypatch, capsys, v23_env: Path) -> None:
        rc = _run_main(monkeypatch, ["env", "--platform", "amd64p32-nacl", "--format", "yaml"])
        assert rc == 0
        out = yaml.safe_load(capsys.readouterr().out)
        assert out["GOARCH"] == "amd64p32"
        assert out["VDLPATH"] == str(v23_env / "release" / "go" / "src")
        assert "PATH" not in out

    def test_shell_format(self, monkeypatch, capsys, v23_env: Path) -> None:
        rc = _run_main(monkeypatch, ["env", "--platform", "386-nacl", "GOOS"])
        assert rc == 0
        assert capsys.readouterr().out.strip() == "GOOS=nacl"

    def test_unsupported_platform_exits_1(self, monkeypatch, capsys, v23_env: Path) -> None:
        assert _run_main(monkeypatch, ["env", "--platform", "mips-plan9"]) == 1
        assert "unsupported platform mips-plan9" in capsys.readouterr().err

    def test_missing_root_exits_1(self, monkeypatch, capsys) -> None:
        monkeypatch.delenv("V23_ROOT", raising=False)
        assert _run_main(monkeypatch, ["env", "--platform", "386-nacl"]) == 1
        assert "V23_ROOT is not set" in capsys.readouterr().err


    def test_invalid_utf8_config_exits_1(self, monkeypatch, capsys, v23_env: Path) -> None:
        (v23_env / "devtools" / "data" / "conf.json").write_bytes(b"\xff\xfe")
        assert _run_main(monkeypatch, ["env", "--platform", "386-nacl"]) == 1
        assert "Error: decoding" in capsys.readouterr().err


class TestRunCommand:
    def test_runs_with_resolved_env(self, monkeypatch, v23_env: Path) -> None:
        with patch("v23_tooling.cli.run_cmd.subprocess.run") as m_run:
            m_run.return_value = MagicMock(returncode=3)
            rc = _run_main(monkeypatch, ["run", "--platform", "armv7-linux", "--", "go", "build"])
        assert rc == 3
        (cmd,) = m_run.call_args[0]
        env = m_run.call_args[1]["env"]
        assert cmd == ["go", "build"]
        assert env["GOARM"] == "7"
        cross_arm = v23_env / "third_party" / "cout" / "xgcc" / "cross_arm"
        assert env["PATH"].split(":")[0] == str(cross_arm)

    def test_missing_command_exits_1(self, monkeypatch, v23_env: Path) -> None:
        assert _run_main(monkeypatch, ["run", "--"]) == 1


class TestPathsCommand:
    def test_prints_paths(self, monkeypatch, capsys, v23_env: Path) -> None:
        assert _run_main(monkeypatch, ["paths"]) == 0
        lines = dict(line.split(": ", 1) for line in capsys.readouterr().out.splitlines())
        assert lines["root"] == str(v23_env)
        assert lines["manifest"] == str(v23_env / ".manifest" / "v2" / "default")
        assert lines["data-dir"] == str(v23_env / "devtools" / "data")
        assert lines["git-repo-host"] == "https://vanadium.googlesource.com/"

    def test_unknown_tool_exits_1(self, monkeypatch, capsys, v23_env: Path) -> None:
        assert _run_main(monkeypatch, ["paths", "--tool", "jiri"]) == 1
        assert "tool 'jiri' not found" in capsys.readouterr().err
