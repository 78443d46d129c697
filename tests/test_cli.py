"""Tests for the command-line interface."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

import cli as cli_module
from cli import cli
from conftest import png_export, svg_export


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_payload(tmp_path, exports) -> str:
    payload = tmp_path / "export-finished.json"
    payload.write_text(json.dumps({"exports": exports}))
    return str(payload)


class TestOptimizeCommand:
    def test_json_output(self, runner, tmp_path, fake_runner, launched_sounds):
        folder = tmp_path / "icons"
        folder.mkdir()

        result = runner.invoke(cli, ["optimize", str(folder), str(folder), "--json-output"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["total"] == 1
        assert data["success"] == 1
        assert data["results"][0]["folder"] == str(folder)
        assert len(fake_runner.commands) == 1
        assert launched_sounds == [["afplay", "/System/Library/Sounds/Glass.aiff"]]

    def test_failure_exits_non_zero(self, runner, tmp_path, fake_runner, launched_sounds):
        fake_runner.returncode = 1
        result = runner.invoke(cli, ["optimize", str(tmp_path), "-j", "--no-sound"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["failed"] == 1
        assert launched_sounds == []

    def test_table_output(self, runner, tmp_path):
        result = runner.invoke(cli, ["optimize", str(tmp_path), "--no-sound"])

        assert result.exit_code == 0
        assert "Optimization Results" in result.output

    def test_logs_each_folder(self, runner, tmp_path, fake_runner):
        result = runner.invoke(cli, ["optimize", str(tmp_path), "--no-sound", "-j"])

        assert result.exit_code == 0
        assert "Compressing SVG files in" in result.stderr
        assert "compression ok" in result.stderr

    def test_unreadable_folder_sizes_do_not_crash(self, runner, tmp_path, monkeypatch):
        from svgoexport import optimizer as optimizer_module

        def denied(folder):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(optimizer_module, "folder_svg_size", denied)

        result = runner.invoke(cli, ["optimize", str(tmp_path), "--no-sound", "-j"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["success"] == 1
        assert data["results"][0]["original_size"] == 0

    def test_requires_folders(self, runner):
        result = runner.invoke(cli, ["optimize"])
        assert result.exit_code == 1

    def test_custom_svgo_path(self, runner, tmp_path, fake_runner):
        runner.invoke(cli, ["optimize", str(tmp_path), "--svgo-path", "/opt/svgo", "--no-sound"])
        assert fake_runner.commands[0][0] == "/opt/svgo"


class TestHandleCommand:
    def test_handles_svg_exports(self, runner, tmp_path, fake_runner):
        payload = write_payload(tmp_path, [
            svg_export("/out/a/x.svg"),
            svg_export("/out/a/y.svg"),
            png_export("/out/b/z.png"),
        ])

        result = runner.invoke(cli, ["handle", payload, "--no-sound", "-j"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {
            "handled": True,
            "success": True,
            "folders": ["/out/a"],
        }
        assert [command[1] for command in fake_runner.commands] == ["--folder=/out/a"]

    def test_reads_stdin(self, runner, fake_runner):
        payload = json.dumps({"exports": [svg_export("/out/a/x.svg")]})

        result = runner.invoke(cli, ["handle", "-", "--no-sound", "-j"], input=payload)

        assert result.exit_code == 0
        assert json.loads(result.stdout)["folders"] == ["/out/a"]

    def test_no_svg_exports(self, runner, tmp_path, fake_runner, launched_sounds):
        payload = write_payload(tmp_path, [png_export("/out/a/x.png")])

        result = runner.invoke(cli, ["handle", payload])

        assert result.exit_code == 0
        assert "No SVG exports found" in result.output
        assert fake_runner.commands == []
        assert launched_sounds == []

    def test_failure_exits_non_zero(self, runner, tmp_path, fake_runner, launched_sounds):
        fake_runner.returncode = 2
        payload = write_payload(tmp_path, [svg_export("/out/a/x.svg")])

        result = runner.invoke(cli, ["handle", payload])

        assert result.exit_code == 1
        assert launched_sounds == [["afplay", "/System/Library/Sounds/Basso.aiff"]]

    def test_invalid_json(self, runner, tmp_path):
        payload = tmp_path / "broken.json"
        payload.write_text("{not json")

        result = runner.invoke(cli, ["handle", str(payload)])

        assert result.exit_code == 2
        assert "Invalid export payload" in result.output

    def test_non_utf8_payload(self, runner, tmp_path):
        payload = tmp_path / "payload.json"
        payload.write_bytes(b'{"exports": ["\xff\xfe"]}')

        result = runner.invoke(cli, ["handle", str(payload)])

        assert result.exit_code == 2
        assert "Invalid export payload" in result.output

    def test_malformed_payload(self, runner, tmp_path):
        payload = tmp_path / "payload.json"
        payload.write_text(json.dumps({"document": "doc"}))

        assert runner.invoke(cli, ["handle", str(payload)]).exit_code == 2


class TestShowCommand:
    def test_prints_quoted_command(self, runner):
        result = runner.invoke(cli, ["show-command", "/out/my icons"])

        assert result.exit_code == 0
        line = result.output.strip()
        assert line.startswith("/usr/local/bin/svgo '--folder=/out/my icons' --pretty")
        assert line.endswith("--enable=removeEditorsNSData")


class TestGroup:
    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "optimize" in result.output

    def test_sound_player_selection(self):
        assert isinstance(cli_module.create_sound_player(True), cli_module.NullSoundPlayer)
        assert isinstance(cli_module.create_sound_player(False), cli_module.SoundPlayer)
