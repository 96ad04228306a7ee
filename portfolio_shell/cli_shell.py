from __future__ import annotations

import argparse
import logging
from typing import Iterable

from rich.console import Console
from rich.text import Text

from portfolio_shell.adapters.desktop.browser_window_manager import BrowserWindowManager
from portfolio_shell.config.settings import Settings
from portfolio_shell.container import DependencyContainer
from portfolio_shell.entities.OutputLine import ERROR, INPUT, OutputLine
from portfolio_shell.exceptions import BaseAppError

# Same colours as the browser terminal.
_STYLES = {
    INPUT: "green",
    ERROR: "red",
}
_DIRECTORY_STYLE = "blue"
_EXIT_WORDS = {"exit", "quit"}


def _style_for(line: OutputLine) -> str:
    if line.is_directory_entry:
        return _DIRECTORY_STYLE
    return _STYLES.get(line.kind, "")


def render(console: Console, lines: Iterable[OutputLine], echo: bool = True) -> None:
    for line in lines:
        if line.kind == INPUT and not echo:
            continue
        console.print(Text(line.text, style=_style_for(line)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="portfolio-shell",
        description="Interactive Portfolio OS terminal over the virtual filesystem.",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=None,
        help="Run a command and exit (repeatable; commands share one session)",
    )
    parser.add_argument(
        "--content",
        default=None,
        help="Path to a JSON content tree (default: PORTFOLIO_CONTENT_PATH or the bundled tree)",
    )
    parser.add_argument("--no-banner", action="store_true", help="Do not print the banner")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for the terminal (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console(highlight=False, soft_wrap=True)
    try:
        app_settings = Settings()
        if args.no_banner:
            app_settings.show_banner = False
        deps = DependencyContainer(
            app_settings, content_path=args.content, window_manager=BrowserWindowManager()
        )
        session = deps.get_session_store().create()
        submit = deps.get_submit_command_use_case()
    except BaseAppError as e:
        console.print(Text(f"Error: {e}", style="red"))
        return 1

    if args.command:
        for raw in args.command:
            render(console, submit.execute(session, raw), echo=False)
        return 0

    render(console, session.log)
    while True:
        try:
            console.print(Text(f"{session.cwd} > ", style="green"), end="")
            raw = input()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if raw.strip().lower() in _EXIT_WORDS:
            break

        lines = submit.execute(session, raw)
        if not len(session.log):
            console.clear()
            continue
        # The prompt already shows what was typed.
        render(console, lines, echo=False)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
