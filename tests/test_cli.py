"""Tests for the command-line entrypoint."""

from __future__ import annotations

import json

import pytest

from lockfile_licenses import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # setup_logging caches loggers process-wide; keep structlog defaults in tests.
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    for var in (
        "LOCKFILE_LICENSES_CONFIG",
        "LOCKFILE_LICENSES_LOG_LEVEL",
        "LOCKFILE_LICENSES_LOG_FORMAT",
        "LOCKFILE_LICENSES_MAX_WORKERS",
    ):
        monkeypatch.delenv(var, raising=False)


class TestMain:
    def test_default_output(self, npm_project):
        assert cli.main(["npm", str(npm_project)]) == cli.EXIT_OK

        report = json.loads((npm_project / "dependencies-licenses.json").read_text())
        assert list(report) == ["foo", "@scope/bar"]
        assert report["foo"]["license_url"] == "node_modules/foo/LICENSE"

    def test_output_relative_to_root(self, npm_project):
        assert cli.main(["NPM", str(npm_project), "out/licenses.json"]) == cli.EXIT_OK
        assert (npm_project / "out" / "licenses.json").is_file()

    def test_relative_root_with_dot_segments(self, npm_project, monkeypatch):
        monkeypatch.chdir(npm_project.parent)
        root_arg = f"./{npm_project.name}/../{npm_project.name}"
        assert cli.main(["npm", root_arg]) == cli.EXIT_OK
        assert (npm_project / "dependencies-licenses.json").is_file()

    def test_jsonl_format(self, npm_project):
        cli.main(["npm", str(npm_project), "report.jsonl", "--format", "jsonl"])
        lines = (npm_project / "report.jsonl").read_text().splitlines()
        assert [json.loads(line)["name"] for line in lines] == ["foo", "@scope/bar"]

    def test_summary(self, npm_project, tmp_path):
        summary = tmp_path / "summary.md"
        cli.main(["all", str(npm_project), "--summary", str(summary)])
        assert "| npm |" in summary.read_text()

    def test_missing_lockfile_writes_empty_report(self, tmp_path):
        assert cli.main(["yarn", str(tmp_path)]) == cli.EXIT_OK
        assert json.loads((tmp_path / "dependencies-licenses.json").read_text()) == {}

    def test_missing_root(self, tmp_path):
        assert cli.main(["npm", str(tmp_path / "nope")]) == cli.EXIT_ERROR

    def test_android_is_reported_unsupported(self, tmp_path):
        (tmp_path / "android").mkdir()
        (tmp_path / "android" / "build.gradle").write_text("dependencies {}\n")
        assert cli.main(["android", str(tmp_path)]) == cli.EXIT_UNSUPPORTED

    def test_all_tolerates_unsupported(self, npm_project):
        (npm_project / "android").mkdir()
        (npm_project / "android" / "build.gradle").write_text("dependencies {}\n")
        assert cli.main(["all", str(npm_project)]) == cli.EXIT_OK

    def test_config_output_name(self, npm_project, tmp_path):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"outputName": "third-party.json", "maxWorkers": 1}))
        assert cli.main(["npm", str(npm_project), "--config", str(config)]) == cli.EXIT_OK
        assert (npm_project / "third-party.json").is_file()

    def test_bad_config(self, npm_project, tmp_path, capsys):
        config = tmp_path / "settings.json"
        config.write_text("[]")
        assert cli.main(["npm", str(npm_project), "--config", str(config)]) == cli.EXIT_ERROR
        assert "ERROR" in capsys.readouterr().err

    def test_unknown_manager(self, tmp_path):
        with pytest.raises(SystemExit):
            cli.main(["cargo", str(tmp_path)])
