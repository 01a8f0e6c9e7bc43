"""CLI entrypoint for building a site."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .builder import SiteBuilder
from .config import ConfigError, load_config, parse_hidden_policy
from .logging import configure_logging
from .paths import PathStructureError
from .walker import HiddenPolicy


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtree",
        description="Turn a directory tree of README.md files into a static HTML site.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only report warnings and errors on the console.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file to use instead of .mdtree.yml in the content root.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a full debug log to this file.",
    )
    parser.add_argument("input_path", type=Path, help="Content directory to convert.")
    parser.add_argument("output_path", type=Path, help="Directory receiving the generated site.")
    parser.add_argument(
        "site_name",
        nargs="?",
        default=None,
        help="Site name shown in the page title and header (e.g. example.org).",
    )
    parser.add_argument(
        "--hidden-entries",
        choices=[policy.value for policy in HiddenPolicy],
        default=None,
        help="Skip hidden entries (default) or stop listing a directory at the first one.",
    )
    parser.add_argument(
        "--stylesheet",
        type=Path,
        default=None,
        help="Stylesheet to inline into every page (defaults to style.css in the content root).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdtree."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    try:
        config = load_config(args.input_path, config_file=args.config)
        config = config.with_overrides(
            output_root=args.output_path.expanduser().resolve(),
            site_name=args.site_name,
            stylesheet=args.stylesheet,
            hidden_entries=parse_hidden_policy(args.hidden_entries) if args.hidden_entries else None,
        )
        report = SiteBuilder().build(config)
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")
    except PathStructureError as exc:
        parser.exit(1, f"mdtree build failed: {exc}\n")
    except (OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"mdtree build failed: {exc}\nRun with --verbose for more details.\n")

    print(
        f"Built {len(report.pages)} pages ({report.assets} assets) into {_relativize(report.output_root)}"
    )


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
