"""
test_cli.py - command-line tests

Runs main(argv) in-process with BOILERPLATE_HOME and cwd under tmp_path.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from boilerplate.cli import build_parser, main, parse_user_input, parse_variables
from boilerplate.domain.errors import ErrorCodes, UserInputError


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """main() reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# =============================================================================
# Option surface
# =============================================================================


class TestParser:
    """build_parser tests."""

    def test_short_options(self):
        """Short aliases map onto their long options."""
        opts = build_parser().parse_args(
            ["-g", "cqrs-query", "-o", "out", "-p", "Get", "-s", "V2", "-vs", "A=1,B=2"]
        )

        assert opts.group == "cqrs-query"
        assert opts.output == "out"
        assert opts.prefix == "Get"
        assert opts.suffix == "V2"
        assert opts.vars == "A=1,B=2"

    def test_long_options(self):
        """Long option names parse."""
        opts = build_parser().parse_args(
            ["--group", "g", "--output", "o", "--prefix", "P", "--suffix", "S", "--vars", "A=1"]
        )

        assert (opts.group, opts.output, opts.prefix, opts.suffix, opts.vars) == (
            "g", "o", "P", "S", "A=1",
        )

    def test_legacy_fn_prefix(self):
        """-fn is accepted as the prefix option."""
        opts = build_parser().parse_args(["-fn", "Get"])

        assert opts.prefix == "Get"

    def test_defaults(self):
        """Nothing given: root group, no output, no prefix."""
        opts = build_parser().parse_args([])

        assert opts.group == ""
        assert opts.output is None
        assert opts.prefix is None
        assert opts.dry_run is False

    def test_short_verbose(self):
        """-v turns on verbose; -vs still means --vars."""
        opts = build_parser().parse_args(["-v", "-vs", "A=1"])

        assert opts.verbose is True
        assert opts.vars == "A=1"


# =============================================================================
# parse_variables
# =============================================================================


class TestParseVariables:
    """parse_variables tests."""

    def test_pairs_in_order(self):
        """Pairs keep command-line order."""
        assert list(parse_variables("B=2,A=1").items()) == [("B", "2"), ("A", "1")]

    def test_split_on_first_equals(self):
        """Only the first "=" separates key and value."""
        assert parse_variables("Expr=a=b") == {"Expr": "a=b"}

    def test_empty_entries_and_bare_words_ignored(self):
        """Empty entries and entries without "=" are dropped."""
        assert parse_variables("A=1,,junk,B=") == {"A": "1", "B": ""}

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_nothing(self, raw):
        """None or blank input gives no variables."""
        assert parse_variables(raw) == {}

    def test_duplicate_key_raises(self):
        """A key given twice is a user input error."""
        with pytest.raises(UserInputError) as exc_info:
            parse_variables("A=1,A=2")

        assert exc_info.value.code == ErrorCodes.DUPLICATE_VARIABLE


# =============================================================================
# parse_user_input
# =============================================================================


class TestParseUserInput:
    """parse_user_input tests."""

    def test_prefix_defaults_to_output_folder(self):
        """Prefix falls back to the last folder of --output."""
        user_input = parse_user_input("", "src/Users/", None, None, None)

        assert user_input.file_name_prefix == "Users"
        assert user_input.output_directory_base_path == "src/Users/"

    def test_explicit_prefix_kept(self):
        """Explicit prefix beats the output folder name."""
        user_input = parse_user_input("", "src/Users", "Get", None, None)

        assert user_input.file_name_prefix == "Get"

    def test_explicit_empty_prefix_kept(self):
        """Explicit empty prefix is not replaced."""
        user_input = parse_user_input("", "src/Users", "", None, None)

        assert user_input.file_name_prefix == ""

    def test_no_output_no_prefix(self):
        """No --output leaves the prefix unset."""
        user_input = parse_user_input(None, None, None, "V2", "A=1")

        assert user_input.group == ""
        assert user_input.file_name_prefix is None
        assert user_input.file_name_suffix == "V2"
        assert dict(user_input.variables) == {"A": "1"}


# =============================================================================
# main
# =============================================================================


class TestMain:
    """main() end-to-end tests."""

    def test_generates_into_cwd(
        self, templates_root: Path, work_dir: Path,
        write_record: Callable[..., Path], query_record: dict,
    ):
        """Root record written under the working directory."""
        write_record(templates_root, "query", **query_record)

        exit_code = main(["-vs", "QueryName=GetUser"])

        assert exit_code == 0
        generated = work_dir / "output" / "GetUser.cs"
        assert generated.read_text(encoding="utf-8") == "public class GetUserQuery{}"

    def test_group_output_and_derived_prefix(
        self, templates_root: Path, work_dir: Path, write_record: Callable[..., Path],
    ):
        """--output overrides record directories and names the prefix."""
        group_dir = templates_root / "cqrs-query"
        write_record(group_dir, "query", fileName="Query", fileExtension="cs",
                     outputDirectory="ignored", template="class {@QueryName}Query{}")
        write_record(group_dir, "handler", fileName="QueryHandler", fileExtension="cs",
                     outputDirectory="ignored", template="class {@QueryName}QueryHandler{}")

        exit_code = main(["-g", "cqrs-query", "-o", "src/GetUser", "-vs", "QueryName=GetUser"])

        assert exit_code == 0
        out = work_dir / "src" / "GetUser"
        assert sorted(p.name for p in out.iterdir()) == ["GetUserQuery.cs", "GetUserQueryHandler.cs"]
        assert (out / "GetUserQueryHandler.cs").read_text(encoding="utf-8") == \
            "class GetUserQueryHandler{}"
        assert not (work_dir / "ignored").exists()

    def test_missing_group_fails(
        self, templates_root: Path, work_dir: Path, capsys: pytest.CaptureFixture[str],
    ):
        """Unknown group exits 1 with the error code on stderr."""
        exit_code = main(["-g", "nope"])

        assert exit_code == 1
        assert "TEMPLATES_DIR_NOT_FOUND" in capsys.readouterr().err
        assert list(work_dir.iterdir()) == []

    def test_empty_settings_fails(
        self, app_home: Path, templates_root: Path, work_dir: Path,
        capsys: pytest.CaptureFixture[str],
    ):
        """Empty appsettings.json exits 1."""
        (app_home / "appsettings.json").write_text("", encoding="utf-8")

        exit_code = main([])

        assert exit_code == 1
        assert "CONFIG_EMPTY" in capsys.readouterr().err

    def test_duplicate_variable_fails(
        self, templates_root: Path, work_dir: Path, capsys: pytest.CaptureFixture[str],
    ):
        """Duplicate -vs key exits 1."""
        exit_code = main(["-vs", "A=1,A=2"])

        assert exit_code == 1
        assert "DUPLICATE_VARIABLE" in capsys.readouterr().err

    def test_settings_templates_folder(
        self, app_home: Path, tmp_path: Path, work_dir: Path, write_record: Callable[..., Path],
    ):
        """Records are read from the configured templates folder."""
        custom_root = tmp_path / "shared-templates"
        write_record(custom_root, "readme", fileName="README", fileExtension="md",
                     outputDirectory="docs", template="# {@Title}")
        (app_home / "appsettings.json").write_text(
            json.dumps({"templatesFolderPath": str(custom_root)}), encoding="utf-8"
        )

        exit_code = main(["-vs", "Title=Hello"])

        assert exit_code == 0
        assert (work_dir / "docs" / "README.md").read_text(encoding="utf-8") == "# Hello"

    def test_dry_run_writes_nothing(
        self, templates_root: Path, work_dir: Path, write_record: Callable[..., Path],
        query_record: dict, capsys: pytest.CaptureFixture[str],
    ):
        """--dry-run prints target paths only."""
        write_record(templates_root, "query", **query_record)

        exit_code = main(["--dry-run", "-vs", "QueryName=GetUser"])

        assert exit_code == 0
        assert str(work_dir / "output" / "GetUser.cs") in capsys.readouterr().out
        assert not (work_dir / "output").exists()

    def test_run_log_saved(
        self, templates_root: Path, work_dir: Path, tmp_path: Path,
        write_record: Callable[..., Path], query_record: dict,
    ):
        """--run-log saves outputs and warnings as JSON."""
        write_record(templates_root, "query", **query_record)
        (templates_root / "broken.json").write_text("{", encoding="utf-8")
        logs_dir = tmp_path / "logs"

        exit_code = main(["--run-log", str(logs_dir)])

        assert exit_code == 0
        [log_file] = list(logs_dir.glob("run_*.json"))
        data = json.loads(log_file.read_text(encoding="utf-8"))
        assert data["result"] == "success"
        assert data["outputs"] == [str(work_dir / "output" / "GetUser.cs")]
        codes = sorted(w["code"] for w in data["warnings"])
        assert codes == [ErrorCodes.RECORD_SKIPPED, ErrorCodes.UNRESOLVED_PLACEHOLDER]

    def test_run_log_on_failure(self, templates_root: Path, work_dir: Path, tmp_path: Path):
        """Failed run still saves its run log."""
        logs_dir = tmp_path / "logs"

        exit_code = main(["-g", "missing", "--run-log", str(logs_dir)])

        assert exit_code == 1
        [log_file] = list(logs_dir.glob("run_*.json"))
        data = json.loads(log_file.read_text(encoding="utf-8"))
        assert data["result"] == "failed"
        assert data["error_code"] == ErrorCodes.TEMPLATES_DIR_NOT_FOUND
