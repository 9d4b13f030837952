"""
memberdoc command line.

Usage:
    memberdoc render model.yaml
    memberdoc render model.yaml -c etc/memberdoc.yaml -o docs/api.md --no-comment
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..builders import BuildContext, BuilderFactory
from ..config import BuildOptions, DocConfig, load_config
from ..exceptions import DocError
from ..log import LogConfig, Logger, LoggerFactory
from ..model import load_types_file
from ..writers import MarkdownWriterFactory
from .output import ConsoleOutput, FileOutput, OutputWriter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memberdoc", description="Generate Markdown documentation for declarations"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="render type pages from a model file")
    render.add_argument("model", type=Path, help="YAML model file")
    render.add_argument("-c", "--config", type=Path, help="YAML configuration file")
    render.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    render.add_argument(
        "--no-comment", action="store_true", default=None, help="omit member comments"
    )
    render.add_argument(
        "--no-deprecated",
        action="store_true",
        default=None,
        help="exclude deprecated members",
    )
    render.add_argument(
        "--no-since", action="store_true", default=None, help="omit 'since' tags"
    )
    render.add_argument(
        "--show-access",
        choices=["public", "protected", "package", "private"],
        help="most permissive access level to document",
    )
    render.add_argument(
        "--log-level",
        choices=["trace", "debug", "info", "warning", "error", "critical", "false"],
        help="log level (overrides configuration)",
    )
    return parser


def _merge_options(options: BuildOptions, args: argparse.Namespace) -> BuildOptions:
    """Apply command line flags on top of configured options."""
    updates = {
        key: getattr(args, key)
        for key in ("no_comment", "no_deprecated", "no_since", "show_access")
        if getattr(args, key) is not None
    }
    if not updates:
        return options
    return BuildOptions(**{**options.model_dump(), **updates})


def _create_logger(config: DocConfig, args: argparse.Namespace) -> Logger:
    level = args.log_level if args.log_level else config.logging.level
    return LoggerFactory.create_root(
        LogConfig.from_params(
            level, colors=config.logging.colors, micros=config.logging.micros
        )
    )


def render(args: argparse.Namespace, out: OutputWriter, lg: Logger, config: DocConfig) -> int:
    """Render all types of the model file to out."""
    options = _merge_options(config.options, args)
    context = BuildContext(options=options, lg=lg)
    factory = BuilderFactory(context, MarkdownWriterFactory(options))

    types = load_types_file(args.model)
    lg.info("rendering", extra={"model": args.model, "types": len(types)})
    pages = [factory.get_type_page_builder(t).build_page().render() for t in types]
    out.write_raw("\n".join(pages))
    return 0


def main(argv: list[str] | None = None, out: OutputWriter | None = None) -> int:
    """
    Run the memberdoc CLI.

    Returns:
        Exit status: 0 on success, 1 on documentation errors
    """
    args = _build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except DocError as e:
        print(f"memberdoc: {e}", file=sys.stderr)
        return 1
    lg = _create_logger(config, args)

    file_out = FileOutput(args.output) if args.output else None
    target: OutputWriter = file_out or out or ConsoleOutput()
    try:
        status = render(args, target, lg, config)
    except DocError as e:
        lg.error("documentation failed", extra={"exception": e, "reason": e})
        return 1
    if file_out is not None:
        file_out.close()
        lg.info("written", extra={"path": args.output})
    return status
