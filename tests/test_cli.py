# Tests for treesync.cli
# CLI commands using Click testing

from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from treesync.cli import cli
from treesync.config.loader import load_config


class TestCliGroup:
    """Tests for main CLI group."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Directory Tree Synchronization" in result.output
        for command in ("sync", "run", "jobs", "config"):
            assert command in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "treesync" in result.output
        assert "1.0.0" in result.output


class TestRunCommand:
    """Tests for the ad-hoc run command."""

    def test_mirror(self, source: Path, destination: Path, write_file):
        write_file(source / "a.txt", "alpha")
        write_file(source / "b.tmp")
        write_file(destination / "old.txt")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["run", str(source), str(destination), "--sync-delete", "--ignore", "*.tmp"],
        )

        assert result.exit_code == 0
        assert (destination / "a.txt").read_text(encoding="utf-8") == "alpha"
        assert not (destination / "b.tmp").exists()
        assert not (destination / "old.txt").exists()
        assert "Copied: 1, overwritten: 0, deleted: 1" in result.output

    def test_two_way(self, source: Path, destination: Path, write_file):
        write_file(source / "a.txt")
        write_file(destination / "b.txt")

        runner = CliRunner()
        result = runner.invoke(cli, ["run", str(source), str(destination), "--copy-mode", "both"])

        assert result.exit_code == 0
        assert (source / "b.txt").exists()
        assert (destination / "a.txt").exists()

    def test_ignore_file_and_log_file(self, source: Path, destination: Path, temp_dir: Path, write_file):
        write_file(source / "a.txt")
        write_file(source / "a.log")
        rules = write_file(temp_dir / "rules.txt", "*.log\n")
        log_file = temp_dir / "events.log"

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["run", str(source), str(destination), "--ignore-file", str(rules), "--log-file", str(log_file)],
        )

        assert result.exit_code == 0
        assert not (destination / "a.log").exists()
        assert "Copied file:" in log_file.read_text(encoding="utf-8")

    def test_same_root_exits_1(self, source: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["run", str(source), str(source)])
        assert result.exit_code == 1
        assert "Sync refused" in result.output

    def test_invalid_copy_mode(self, source: Path, destination: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["run", str(source), str(destination), "--copy-mode", "sideways"])
        assert result.exit_code == 2


class TestSyncCommand:
    """Tests for running configured jobs."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["sync", "--help"])
        assert result.exit_code == 0
        assert "--interval" in result.output

    def test_missing_config(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["sync"])
        assert result.exit_code == 1
        assert "treesync config init" in result.output

    def test_enabled_jobs(self, config_file: Path, source: Path, destination: Path, write_file):
        write_file(source / "a.txt")
        write_file(source / "scratch.tmp")

        runner = CliRunner()
        result = runner.invoke(cli, ["sync"])

        assert result.exit_code == 0
        assert "mirror" in result.output
        assert (destination / "a.txt").exists()
        assert not (destination / "scratch.tmp").exists()

    def test_named_disabled_job_runs(self, config_file: Path, source: Path, destination: Path, write_file):
        write_file(source / "a.txt")

        runner = CliRunner()
        result = runner.invoke(cli, ["sync", "disabled", "-c", str(config_file)])

        assert result.exit_code == 0
        assert (destination / "a.txt").exists()

    def test_unknown_job(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["sync", "nope"])
        assert result.exit_code == 1
        assert "Unknown job(s): nope" in result.output

    def test_no_enabled_jobs(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"jobs": {}}), encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["sync", "-c", str(path)])

        assert result.exit_code == 0
        assert "No enabled jobs" in result.output

    def test_invalid_config(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"jobs": {"j": {"source": "/a"}}}), encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["sync", "-c", str(path)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_interval_stops_on_interrupt(self, config_file: Path, source: Path, destination: Path, write_file):
        write_file(source / "a.txt")

        runner = CliRunner()
        with patch("treesync.cli.time.sleep", side_effect=KeyboardInterrupt) as mock_sleep:
            result = runner.invoke(cli, ["sync", "--interval", "5"])

        assert result.exit_code == 0
        mock_sleep.assert_called_once_with(5.0)
        assert "Stopped" in result.output
        assert (destination / "a.txt").exists()

    def test_interval_must_be_positive(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["sync", "--interval", "0"])
        assert result.exit_code == 2


class TestJobsCommand:
    """Tests for listing jobs."""

    def test_list(self, config_file: Path):
        runner = CliRunner(env={"COLUMNS": "200"})
        result = runner.invoke(cli, ["jobs"])
        assert result.exit_code == 0
        assert "mirror" in result.output
        assert "disabled" not in result.output

    def test_list_all(self, config_file: Path):
        runner = CliRunner(env={"COLUMNS": "200"})
        result = runner.invoke(cli, ["jobs", "--all"])
        assert result.exit_code == 0
        assert "disabled" in result.output

    def test_empty(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("jobs: {}\n", encoding="utf-8")

        runner = CliRunner(env={"COLUMNS": "200"})
        result = runner.invoke(cli, ["jobs", "-c", str(path)])

        assert result.exit_code == 0
        assert "No jobs configured" in result.output


class TestConfigCommands:
    """Tests for the config command group."""

    def test_init(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "init"])

        assert result.exit_code == 0
        assert "Created configuration" in result.output
        assert (temp_home / ".config" / "treesync" / "config.yaml").exists()

        result = runner.invoke(cli, ["config", "init"])
        assert "already exists" in result.output

    def test_path(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "path"])
        assert result.exit_code == 0
        assert result.output.strip() == str(temp_home / ".config" / "treesync" / "config.yaml")

    def test_show(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "Jobs: 2" in result.output
        assert "mirror:" in result.output

    def test_show_default(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show", "--default"])
        assert result.exit_code == 0
        assert "copy_mode" in result.output

    def test_show_missing(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_validate(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_validate_invalid(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("jobs:\n  j:\n    source: /a\n    destination: /b\n    copy_mode: sideways\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["config", "validate", "-c", str(path)])

        assert result.exit_code == 1
        assert "copy_mode" in result.output

    def test_add(self, temp_home: Path, temp_dir: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["config", "add", "photos", "/data/photos", "/mnt/photos", "--copy-mode", "both", "--sync-date", "--ignore", "*.xmp"],
        )

        assert result.exit_code == 0
        assert "Added job 'photos'" in result.output
        job = load_config().jobs["photos"]
        assert job.copy_mode.value == "both"
        assert job.sync_date is True
        assert job.gitignore == ["*.xmp"]

    def test_add_existing_requires_force(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "add", "mirror", "/a", "/b"])
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(cli, ["config", "add", "mirror", "/a", "/b", "--force", "--disabled"])
        assert result.exit_code == 0
        job = load_config(config_file).jobs["mirror"]
        assert job.source == "/a"
        assert job.enabled is False
