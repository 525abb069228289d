"""CLI entrypoints for devdocs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .aggregator import SourceReadError
from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator, OutputWriteError, RunResult

_COMMANDS = {
    "all": "Generate every document and the README index pages.",
    "api": "Generate the plugin API reference from TypeScript declarations.",
    "css": "Generate CSS variable, CSS class, DOM structure and theme guide documents.",
    "analysis": "Generate the application API analysis from ClojureScript sources.",
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    kwargs["default"] = argparse.SUPPRESS if suppress_default else False
    parser.add_argument("-v", "--verbose", **kwargs)


def _add_quiet_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Only report warnings and errors.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devdocs",
        description="Generate plugin and theme developer documentation from a source tree.",
    )
    _add_verbose_option(parser)
    _add_quiet_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in _COMMANDS.items():
        sub = subparsers.add_parser(command, help=help_text)
        _add_verbose_option(sub, suppress_default=True)
        _add_quiet_option(sub, suppress_default=True)
        sub.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Path to the project root (defaults to current directory).",
        )
        sub.add_argument(
            "--output-dir",
            default=None,
            help="Directory for generated documents (overrides output.dir in .devdocs.yml).",
        )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for devdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    orchestrator = Orchestrator()
    runners = {
        "all": orchestrator.run_all,
        "api": orchestrator.run_api,
        "css": orchestrator.run_styles,
        "analysis": orchestrator.run_analysis,
    }

    project_root = Path(args.path).expanduser()
    if not project_root.is_dir():
        parser.exit(1, f"Project path not found: {project_root}\n")

    try:
        config = load_config(project_root)
        if args.output_dir:
            config.output.dir = args.output_dir
        result = runners[args.command](config)
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (SourceReadError, OutputWriteError) as exc:
        parser.exit(1, f"devdocs {args.command} failed: {exc}\nRun with --verbose for more details.\n")
    except ValueError as exc:
        parser.exit(1, f"devdocs {args.command} failed: {exc}\n")

    _report(result)


def _report(result: RunResult) -> None:
    for path in result.written:
        print(f"Generated {_relativize(path)}")
    if result.link_issues:
        print(f"{len(result.link_issues)} broken link(s) found in the index pages.")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
