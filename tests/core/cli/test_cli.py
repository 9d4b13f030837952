"""Tests for memberdoc.cli argument handling and output writers."""

import io

import pytest

from memberdoc.cli import ConsoleOutput, FileOutput
from memberdoc.cli.cli import _build_parser, _merge_options
from memberdoc.config import BuildOptions


class TestParser:
    """Tests for the render subcommand arguments."""

    def test_flags_default_to_none(self):
        args = _build_parser().parse_args(["render", "model.yaml"])

        assert args.no_comment is None
        assert args.no_deprecated is None
        assert args.no_since is None
        assert args.show_access is None
        assert args.log_level is None

    @pytest.mark.parametrize(
        "level", ["trace", "debug", "info", "warning", "error", "critical", "false"]
    )
    def test_log_levels(self, level):
        args = _build_parser().parse_args(["render", "m.yaml", "--log-level", level])
        assert args.log_level == level

    def test_command_required(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args([])

    def test_invalid_access(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["render", "m.yaml", "--show-access", "world"])


class TestMergeOptions:
    """Tests for applying flags over configured options."""

    def test_no_flags_keeps_options(self):
        options = BuildOptions(no_since=True)
        args = _build_parser().parse_args(["render", "m.yaml"])

        assert _merge_options(options, args) is options

    def test_flags_override(self):
        options = BuildOptions(no_since=True, show_access="public")
        args = _build_parser().parse_args(
            ["render", "m.yaml", "--no-comment", "--show-access", "private"]
        )

        merged = _merge_options(options, args)

        assert merged.no_comment is True
        assert merged.no_since is True
        assert merged.show_access == "private"


class TestOutput:
    """Tests for ConsoleOutput and FileOutput."""

    def test_console_output(self):
        buffer = io.StringIO()
        out = ConsoleOutput(buffer)
        out.write("Hello")
        out.write_raw("raw")

        assert buffer.getvalue() == "Hello\nraw"

    def test_file_output_written_on_close(self, temp_dir):
        path = temp_dir / "out" / "api.md"
        out = FileOutput(path)
        out.write("# Title")
        out.write_raw("body")

        assert not path.exists()
        out.close()
        assert path.read_text() == "# Title\nbody"
