"""
End-to-end tests for the ``memberdoc render`` workflow.

Runs the CLI entry point against model and configuration files written to a
temporary directory and checks the produced Markdown and exit status.
"""

import io
import os

import pytest

from memberdoc.cli import ConsoleOutput, main


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """Keep MEMBERDOC_* variables of the host out of the run."""
    for key in list(os.environ):
        if key.startswith("MEMBERDOC_"):
            monkeypatch.delenv(key)


def _render(*argv: str) -> tuple[int, str]:
    buffer = io.StringIO()
    status = main(["render", *argv, "--log-level", "false"], out=ConsoleOutput(buffer))
    return status, buffer.getvalue()


@pytest.mark.e2e
class TestRenderWorkflow:
    """Render a model file end to end."""

    def test_renders_all_pages(self, model_file):
        status, output = _render(str(model_file))

        assert status == 0
        assert output.startswith("# Enum Color\n\nPackage `com.example`\n\nPrimary colors.\n")
        assert "## Enum Constant Details" in output
        assert output.index("### RED") < output.index("### GREEN") < output.index("### BLUE")
        assert "**Deprecated.** Use LIME." in output
        assert "**Preview.** `BLUE` is a preview API" in output
        assert "**See Also:** GREEN" in output
        assert output.rstrip().endswith("# Class Shape\n\nPackage `com.example`\n\nA shape.")

    def test_class_has_no_constant_section(self, temp_dir):
        path = temp_dir / "shape.yaml"
        path.write_text("types:\n  - name: Shape\n    comment: A shape.\n")

        status, output = _render(str(path))

        assert status == 0
        assert output == "# Class Shape\n\nA shape.\n"

    def test_no_comment(self, model_file):
        status, output = _render(str(model_file), "--no-comment")

        assert status == 0
        assert "The color red." not in output
        assert "Primary colors." not in output
        assert "public static final Color RED" in output

    def test_no_deprecated(self, model_file):
        _, output = _render(str(model_file), "--no-deprecated")

        assert "### GREEN" not in output
        assert "### RED" in output

    def test_config_file(self, model_file, temp_dir):
        config = temp_dir / "memberdoc.yaml"
        config.write_text("options:\n  no_since: true\n")

        _, output = _render(str(model_file), "-c", str(config))

        assert "**Since:**" not in output
        assert "**See Also:** GREEN" in output

    def test_env_override(self, model_file, monkeypatch):
        monkeypatch.setenv("MEMBERDOC_OPTIONS_NO_COMMENT", "true")

        _, output = _render(str(model_file))

        assert "The color red." not in output

    def test_modifiers_as_string(self, temp_dir):
        path = temp_dir / "color.yaml"
        path.write_text(
            "types:\n  - name: Color\n    kind: enum\n    members:\n"
            "      - name: RED\n        modifiers: static\n"
            "      - name: GREEN\n        modifiers:\n"
        )

        status, output = _render(str(path))

        assert status == 0
        assert "```\npublic static Color RED\n```" in output
        assert "```\npublic Color GREEN\n```" in output

    def test_output_file(self, model_file, temp_dir):
        target = temp_dir / "docs" / "api.md"
        buffer = io.StringIO()

        status = main(
            ["render", str(model_file), "-o", str(target), "--log-level", "false"],
            out=ConsoleOutput(buffer),
        )

        assert status == 0
        assert buffer.getvalue() == ""
        assert target.read_text().startswith("# Enum Color")


@pytest.mark.e2e
class TestRenderFailures:
    """Exit status and reporting on errors."""

    def test_missing_model(self, temp_dir):
        status, output = _render(str(temp_dir / "missing.yaml"))

        assert status == 1
        assert output == ""

    def test_malformed_model(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("types:\n  - kind: enum\n")

        status, _ = _render(str(path))

        assert status == 1

    def test_invalid_config(self, model_file, temp_dir, capsys):
        config = temp_dir / "memberdoc.yaml"
        config.write_text("options:\n  no_coment: true\n")

        status, _ = _render(str(model_file), "-c", str(config))

        assert status == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_malformed_modifiers(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text(
            "types:\n  - name: Color\n    kind: enum\n    members:\n"
            "      - name: RED\n        modifiers: {static: true}\n"
        )

        status, output = _render(str(path))

        assert status == 1
        assert output == ""

    def test_duplicate_type(self, temp_dir):
        path = temp_dir / "dup.yaml"
        path.write_text("types:\n  - name: a.Shape\n  - name: a.Shape\n")

        status, _ = _render(str(path))

        assert status == 1

    def test_error_logged(self, model_file, temp_dir, capsys):
        path = temp_dir / "bad.yaml"
        path.write_text("types: 3\n")

        status = main(
            ["render", str(path), "--log-level", "error"], out=ConsoleOutput(io.StringIO())
        )

        assert status == 1
        err = capsys.readouterr().err
        assert "documentation failed" in err
        assert "[exception:ModelError]" in err

    def test_critical_log_level(self, model_file, capsys):
        status = main(
            ["render", str(model_file), "--log-level", "critical"],
            out=ConsoleOutput(io.StringIO()),
        )

        assert status == 0
        assert capsys.readouterr().err == ""
