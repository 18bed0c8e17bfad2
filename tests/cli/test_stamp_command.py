"""Tests for the depstamp command line."""

import re

from typer.testing import CliRunner

from depstamp import __version__
from depstamp.cli import app

# Wide console so rich does not wrap log lines mid-phrase
runner = CliRunner(env={"COLUMNS": "400"})


class TestOutput:
    def test_hash_on_stdout(self, git_repo):
        git_repo.write("a.typ")
        sha = git_repo.commit()

        result = runner.invoke(app, [str(git_repo.root / "a.typ")])
        assert result.exit_code == 0
        assert result.stdout == f"{sha}\n"

    def test_date_mode(self, git_repo):
        git_repo.write("a.typ")
        git_repo.commit(when="2021-07-14")

        result = runner.invoke(app, [str(git_repo.root / "a.typ"), "--date"])
        assert result.exit_code == 0
        assert result.stdout == "2021-07-14\n"

    def test_dirty_suffix(self, git_repo):
        git_repo.write("a.typ")
        sha = git_repo.commit()
        git_repo.write("a.typ", "edited\n")

        result = runner.invoke(app, [str(git_repo.root / "a.typ")])
        assert result.stdout == f"{sha} DIRTY\n"

    def test_modes_refer_to_same_commit(self, git_repo):
        git_repo.write("a.typ")
        sha = git_repo.commit(when="2020-02-29")
        target = str(git_repo.root / "a.typ")

        hash_line = runner.invoke(app, [target]).stdout.strip()
        date_line = runner.invoke(app, [target, "--date"]).stdout.strip()
        assert hash_line == sha
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", date_line)
        assert git_repo.git("show", "-s", "--format=%cs", hash_line) == date_line

    def test_custom_marker_from_env(self, git_repo, monkeypatch):
        git_repo.write("a.typ")
        sha = git_repo.commit()
        git_repo.write("a.typ", "edited\n")
        monkeypatch.setenv("DEPSTAMP_DIRTY_MARKER", "MODIFIED")

        result = runner.invoke(app, [str(git_repo.root / "a.typ")])
        assert result.stdout == f"{sha} MODIFIED\n"

    def test_monitored_path_logged_to_stderr(self, git_repo):
        git_repo.write("a.typ")
        git_repo.commit()

        result = runner.invoke(app, [str(git_repo.root / "a.typ")])
        assert "Monitor changes for file" in result.stderr
        assert "Monitor" not in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestErrors:
    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.typ")])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Error [InvalidTargetError]: Invalid target" in result.stderr

    def test_never_committed(self, git_repo):
        git_repo.write("old.typ")
        git_repo.commit()
        git_repo.write(".deps.toml", '["new.typ"]\ndependencies = []\n')
        git_repo.write("new.typ")

        result = runner.invoke(app, [str(git_repo.root / "new.typ")])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Error [NoHistoryFoundError]:" in result.stderr

    def test_malformed_deps_file(self, git_repo):
        git_repo.write(".deps.toml", "[[[ not toml")
        git_repo.write("a.typ")
        git_repo.commit()

        result = runner.invoke(app, [str(git_repo.root / "a.typ")])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Error [ConfigParseError]:" in result.stderr

    def test_outside_repository(self, tmp_path):
        target = tmp_path / "a.typ"
        target.write_text("x\n")

        result = runner.invoke(app, [str(target)])
        assert result.exit_code == 1
        assert "Error [RepositoryAccessError]:" in result.stderr

    def test_quiet_still_reports_errors(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.typ"), "--quiet"])
        assert result.exit_code == 1
        assert "Error [InvalidTargetError]: Invalid target" in result.stderr

    def test_errors_tagged_with_component(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.typ")])
        assert "depstamp.cli.stamp: Error [InvalidTargetError]" in result.stderr

    def test_missing_settings_file(self, git_repo, tmp_path):
        git_repo.write("a.typ")
        git_repo.commit()

        result = runner.invoke(
            app, [str(git_repo.root / "a.typ"), "--config", str(tmp_path / "nope.toml")]
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Error [ConfigParseError]:" in result.stderr
        assert "config file not found" in result.stderr

    def test_invalid_setting_value(self, git_repo, tmp_path):
        git_repo.write("a.typ")
        git_repo.commit()
        settings = tmp_path / "settings.toml"
        settings.write_text('verbosity = "loud"\n')

        result = runner.invoke(app, [str(git_repo.root / "a.typ"), "--config", str(settings)])
        assert result.exit_code == 1
        assert "Error [InvalidConfigError]:" in result.stderr
