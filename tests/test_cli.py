from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Generator, List

import pytest
from click.testing import CliRunner, Result

from semvermatch.cli import cli, main
from semvermatch.__version__ import __version__
from semvermatch.utils.logger import disable_logging


@pytest.fixture(autouse=True)
def isolated_cli(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Run every CLI test from an empty directory with colors disabled."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("SEMVERMATCH_CONFIG", raising=False)
    yield
    disable_logging()


def invoke(args: List[str]) -> Result:
    return CliRunner().invoke(cli, args)


def output_lines(result: Result) -> List[str]:
    return [line.strip() for line in result.output.splitlines() if line.strip()]


@pytest.mark.integration
class TestGlobalOptions:
    """Tests for the cli group options."""

    def test_version_option(self) -> None:
        """Test --version prints the package version."""
        result = invoke(["--version"])

        assert result.exit_code == 0
        assert f"semvermatch {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        """Test -h lists every subcommand."""
        result = invoke(["-h"])

        assert result.exit_code == 0
        for name in ("show", "compare", "match"):
            assert name in result.output

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        """Test a nonexistent --config path is a usage error."""
        result = invoke(["--config", str(tmp_path / "missing.toml"), "show", "1.0.0"])

        assert result.exit_code == 2

    def test_invalid_config_exits_one(self, tmp_path: Path) -> None:
        """Test configuration errors are reported and exit 1."""
        path = tmp_path / "semvermatch.toml"
        path.write_text("[semvermatch]\nunknown = 1\n", encoding="utf-8")

        result = invoke(["show", "1.0.0"])

        assert result.exit_code == 1
        assert "Unknown configuration keys: unknown" in result.output

    def test_non_table_config_section_exits_one(self, tmp_path: Path) -> None:
        """Test a scalar [semvermatch] value is a configuration error."""
        (tmp_path / "semvermatch.toml").write_text("semvermatch = 5\n", encoding="utf-8")

        result = invoke(["show", "1.0.0"])

        assert result.exit_code == 1
        assert "semvermatch must be a table" in result.output
        assert "Unexpected error" not in result.output


@pytest.mark.integration
class TestShowCommand:
    """Tests for the show command."""

    def test_simple_format(self) -> None:
        """Test simple output lists the components of each version."""
        result = invoke(["show", "1.0.0-rc.1+build.5", "2.1.0", "-f", "simple"])

        assert result.exit_code == 0
        assert output_lines(result) == [
            "1.0.0-rc.1+build.5 1 0 0 rc.1 build.5",
            "2.1.0 2 1 0 - -",
        ]

    def test_json_format(self) -> None:
        """Test JSON output keeps integer pre-release identifiers."""
        result = invoke(["show", "1.0.0-alpha.1", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {
                "version": "1.0.0-alpha.1",
                "major": 1,
                "minor": 0,
                "patch": 0,
                "pre": ["alpha", 1],
                "build": None,
            }
        ]

    def test_table_format(self) -> None:
        """Test the default table output shows the version."""
        result = invoke(["show", "3.2.1"])

        assert result.exit_code == 0
        assert "3.2.1" in result.output
        assert "Major" in result.output

    def test_invalid_version_exits_one(self) -> None:
        """Test invalid versions are reported while valid ones are shown."""
        result = invoke(["show", "1.0", "2.0.0", "-f", "simple"])

        assert result.exit_code == 1
        assert "Invalid version" in result.output
        assert "2.0.0 2 0 0 - -" in result.output


@pytest.mark.integration
class TestCompareCommand:
    """Tests for the compare command."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("1.0.0-alpha", "1.0.0", "lt"),
            ("1.0.0+a", "1.0.0+b", "eq"),
            ("2.0.0", "1.9.9", "gt"),
        ],
    )
    def test_simple_format(self, left: str, right: str, expected: str) -> None:
        """Test simple output prints the ordering."""
        result = invoke(["compare", left, right, "-f", "simple"])

        assert result.exit_code == 0
        assert output_lines(result) == [expected]

    def test_json_format(self) -> None:
        """Test JSON output carries both inputs and the result."""
        result = invoke(["compare", "1.0.0", "1.0.1", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "left": "1.0.0",
            "right": "1.0.1",
            "result": "lt",
        }

    def test_default_prints_bare_ordering(self) -> None:
        """Test compare prints only the ordering without --format."""
        result = invoke(["compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert output_lines(result) == ["lt"]

    def test_table_format(self) -> None:
        """Test the table output contains both versions and the ordering."""
        result = invoke(["compare", "1.0.0", "1.0.0+build", "-f", "table"])

        assert result.exit_code == 0
        assert "eq" in result.output
        assert "Result" in result.output

    def test_invalid_version_exits_one(self) -> None:
        """Test an invalid operand exits 1."""
        result = invoke(["compare", "1.0.0", "01.0.0"])

        assert result.exit_code == 1
        assert "Invalid version" in result.output

    def test_missing_argument_is_usage_error(self) -> None:
        """Test a missing operand exits 2."""
        assert invoke(["compare", "1.0.0"]).exit_code == 2


@pytest.mark.integration
class TestMatchCommand:
    """Tests for the match command."""

    def test_simple_format(self) -> None:
        """Test each version is listed with its outcome."""
        result = invoke(["match", "~> 2.1.2", "2.1.1", "2.1.6", "2.2.0", "-f", "simple"])

        assert result.exit_code == 0
        assert output_lines(result) == [
            "2.1.1 no-match",
            "2.1.6 match",
            "2.2.0 no-match",
        ]

    def test_matching_only(self) -> None:
        """Test --matching-only hides versions that do not match."""
        result = invoke(
            ["match", ">= 1.0.0 and < 2.0.0", "0.9.0", "1.5.0", "2.0.0",
             "--matching-only", "-f", "simple"]
        )

        assert result.exit_code == 0
        assert output_lines(result) == ["1.5.0 match"]

    def test_no_match_exits_one(self) -> None:
        """Test exit status 1 when nothing satisfies the requirement."""
        result = invoke(["match", "> 3.0.0", "1.0.0", "2.0.0", "-f", "simple"])

        assert result.exit_code == 1
        assert output_lines(result) == ["1.0.0 no-match", "2.0.0 no-match"]

    def test_latest(self) -> None:
        """Test --latest prints only the greatest matching version."""
        result = invoke(
            ["match", "~> 2.0", "2.4.0", "2.9.1", "3.0.0", "2.10.0-rc.1",
             "--latest", "--no-allow-pre", "-f", "simple"]
        )

        assert result.exit_code == 0
        assert output_lines(result) == ["2.9.1"]

    def test_latest_json_without_match(self) -> None:
        """Test --latest JSON output reports null when nothing matches."""
        result = invoke(["match", "< 1.0.0", "1.0.0", "--latest", "-f", "json"])

        assert result.exit_code == 1
        assert json.loads(result.output) == {"requirement": "< 1.0.0", "latest": None}

    def test_allow_pre_flag(self) -> None:
        """Test --no-allow-pre keeps pre-releases out of >= ranges."""
        allowed = invoke(["match", ">= 1.0.0", "1.1.0-beta", "-f", "simple"])
        denied = invoke(["match", ">= 1.0.0", "1.1.0-beta", "--no-allow-pre", "-f", "simple"])

        assert allowed.exit_code == 0
        assert output_lines(allowed) == ["1.1.0-beta match"]
        assert denied.exit_code == 1
        assert output_lines(denied) == ["1.1.0-beta no-match"]

    def test_json_format(self) -> None:
        """Test JSON output includes the requirement and policy."""
        result = invoke(["match", "== 1.0.0", "1.0.0+build", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "requirement": "== 1.0.0",
            "allow_pre": True,
            "results": [{"version": "1.0.0+build", "matches": True}],
        }

    def test_table_format(self) -> None:
        """Test the default table output names the requirement."""
        result = invoke(["match", "~> 1.0", "1.2.3"])

        assert result.exit_code == 0
        assert "1.2.3" in result.output
        assert "yes" in result.output

    def test_deprecated_operator_warns(self) -> None:
        """Test deprecated != is accepted with a warning on the console."""
        result = invoke(["match", "!= 1.0.0", "1.0.1", "-f", "simple"])

        assert result.exit_code == 0
        assert "[WARNING]" in result.output
        assert "deprecated" in result.output
        assert "1.0.1 match" in output_lines(result)

    def test_invalid_requirement_exits_one(self) -> None:
        """Test a malformed requirement is reported."""
        result = invoke(["match", ">= 1.0.0 and", "1.0.0"])

        assert result.exit_code == 1
        assert "Invalid requirement" in result.output

    def test_invalid_version_exits_one(self) -> None:
        """Test a malformed candidate version is reported."""
        result = invoke(["match", ">= 1.0.0", "1.0.0.0"])

        assert result.exit_code == 1
        assert "Invalid version" in result.output


@pytest.mark.integration
class TestConfigIntegration:
    """Tests for configuration driving command defaults."""

    def test_allow_pre_from_config(self, tmp_path: Path) -> None:
        """Test allow_pre = false in semvermatch.toml applies to match."""
        (tmp_path / "semvermatch.toml").write_text(
            "[semvermatch]\nallow_pre = false\n", encoding="utf-8"
        )

        result = invoke(["match", "> 1.0.0", "1.1.0-rc.1", "-f", "simple"])

        assert result.exit_code == 1
        assert output_lines(result) == ["1.1.0-rc.1 no-match"]

    def test_cli_flag_overrides_config(self, tmp_path: Path) -> None:
        """Test --allow-pre wins over the configured default."""
        (tmp_path / "semvermatch.toml").write_text(
            "[semvermatch]\nallow_pre = false\n", encoding="utf-8"
        )

        result = invoke(["match", "> 1.0.0", "1.1.0-rc.1", "--allow-pre", "-f", "simple"])

        assert result.exit_code == 0

    def test_output_format_from_pyproject(self, tmp_path: Path) -> None:
        """Test output_format from [tool.semvermatch] is used by default."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.semvermatch]\noutput_format = "simple"\n', encoding="utf-8"
        )

        result = invoke(["compare", "1.0.0", "2.0.0"])

        assert result.exit_code == 0
        assert output_lines(result) == ["lt"]

    def test_explicit_config_option(self, tmp_path: Path) -> None:
        """Test --config loads a file outside the discovery locations."""
        path = tmp_path / "settings.toml"
        path.write_text('[semvermatch]\noutput_format = "json"\n', encoding="utf-8")

        result = invoke(["--config", str(path), "compare", "1.0.0", "1.0.0"])

        assert result.exit_code == 0
        assert json.loads(result.output)["result"] == "eq"


@pytest.mark.integration
class TestMain:
    """Tests for the main() wrapper around the click group."""

    def test_success_returns_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a successful command returns 0."""
        monkeypatch.setattr(
            sys, "argv", ["semvermatch", "compare", "1.0.0", "2.0.0", "-f", "simple"]
        )

        assert main() == 0

    def test_command_exit_code_is_returned(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test sys.exit codes raised by commands are returned."""
        monkeypatch.setattr(
            sys, "argv", ["semvermatch", "match", "> 2.0.0", "1.0.0", "-f", "simple"]
        )

        assert main() == 1

    def test_usage_error_returns_two(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test click usage errors return their exit code."""
        monkeypatch.setattr(sys, "argv", ["semvermatch", "compare", "1.0.0"])

        assert main() == 2
