from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from seldir import __version__
from seldir.core.config import RuntimeConfig, get_runtime_config
from seldir.core.errors import SeldirError, format_error
from seldir.core.logging import configure_logging, get_logger, log_event
from seldir.core.navigation import NavigationController
from seldir.core.path_navigation import resolve_start_directory
from seldir.core.paths import settings_path
from seldir.core.settings_store import SettingsStore
from seldir.services.exit_handoff import SHELL_FUNCTION, emit_exit_path
from seldir.themes.themes import DEFAULT_ACCENT, parse_accent_color

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seldir",
        description="Pick a directory from a three-column browser and print it.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Directory to start in. Defaults to the startupPath setting or the cwd.",
    )
    parser.add_argument(
        "--accent-color",
        "--accent_color",
        dest="accent_color",
        help="Accent color for directories and the cursor (default: red).",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        dest="output_file",
        help="Write the chosen path to this file instead of stdout.",
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        default=None,
        help="Start with dot entries visible.",
    )
    parser.add_argument(
        "--no-watch",
        action="store_true",
        help="Do not reload panes when the working directory changes on disk.",
    )

    parser.add_argument(
        "--print-config",
        dest="handler",
        action="store_const",
        const=handle_print_config,
        help="Print resolved runtime config and settings to stdout.",
    )
    parser.add_argument(
        "--shell-init",
        dest="handler",
        action="store_const",
        const=handle_shell_init,
        help="Print a shell function that cds into the chosen directory.",
    )

    return parser


def resolve_accent_color(
    cli_value: str | None,
    runtime: RuntimeConfig,
    settings: dict[str, Any],
) -> str:
    preferences = settings.get("userPreferences", {})
    for candidate in (cli_value, runtime.accent_color, preferences.get("accentColor")):
        if candidate:
            parse_accent_color(candidate)
            return candidate
    return DEFAULT_ACCENT


def handle_print_config(_args: argparse.Namespace) -> None:
    path = settings_path()
    payload = {
        "runtime": get_runtime_config().model_dump(mode="json"),
        "settings_path": str(path),
        "settings": SettingsStore(path).read(),
    }
    print(json.dumps(payload, indent=2))


def handle_shell_init(_args: argparse.Namespace) -> None:
    print(SHELL_FUNCTION, end="")


def run_browser(args: argparse.Namespace) -> Path | None:
    from seldir.app import Seldir

    runtime = get_runtime_config()
    configure_logging(
        level=runtime.log_level,
        format_name=runtime.log_format,
        log_dir=runtime.log_dir,
    )
    store = SettingsStore(settings_path())
    settings = store.load()
    preferences = settings.get("userPreferences", {})

    accent = resolve_accent_color(args.accent_color, runtime, settings)
    show_hidden = (
        args.show_hidden
        if args.show_hidden is not None
        else bool(preferences.get("showHidden", False))
    )
    start = resolve_start_directory(args.path, preferences.get("startupPath"))
    log_event(logger, "session.start", directory=str(start), show_hidden=show_hidden)

    navigation = NavigationController.start(start, show_hidden=show_hidden)
    app = Seldir(
        navigation,
        accent_color=accent,
        settings_store=store,
        settings=settings,
        watch=runtime.watch and not args.no_watch,
    )
    return app.run()


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.handler is not None:
        args.handler(args)
        return

    try:
        chosen = run_browser(args)
        if chosen is None:
            raise SystemExit(1)
        output_file = args.output_file or get_runtime_config().output_file
        emit_exit_path(
            chosen,
            output_file=Path(output_file).expanduser() if output_file else None,
        )
    except SeldirError as exc:
        message, severity = format_error(exc)
        print(f"seldir: {severity}: {message}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
