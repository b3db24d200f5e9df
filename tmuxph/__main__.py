"""Entry point for python -m tmuxph.

Usage:
    # Create a session document with two windows, focusing the second
    python -m tmuxph create -n work -d ~/src/proj -f 1 \\
        -w "code:./src:off:0:nvim:cargo watch -x check" \\
        -w "shell:.:on:0:clear && bash"

    # Single default window, printed instead of written
    python -m tmuxph create -n scratch -d /tmp -D -o

    # Apply a layout to window 0, dropping pane 2 without prompting
    python -m tmuxph edit -n work -i 0 -l "f93e,211x62,0,0[...]" --drop 2

    # Count the panes of a layout
    python -m tmuxph panes "5be4,211x62,0,0,15"

    # Show a session document
    python -m tmuxph show -n work
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from tmuxph.logging_config import get_logger

if TYPE_CHECKING:
    from tmuxph.models import AppConfig
    from tmuxph.store import SessionStore

logger = get_logger("cli")


def _setup_logging(args: argparse.Namespace) -> None:
    """Configure logging based on command-line arguments."""
    from tmuxph.logging_config import setup_logging

    setup_logging(
        level="DEBUG" if args.debug else args.log_level,
        log_to_console=args.debug,
        log_to_file=not args.no_log_file,
        log_file=Path(args.log_file).expanduser() if args.log_file else None,
    )


def _load_app_config(args: argparse.Namespace) -> AppConfig:
    from tmuxph.config import load_config

    return load_config(Path(args.config) if args.config else None)


def _make_store(args: argparse.Namespace, config: AppConfig) -> SessionStore:
    from tmuxph.store import SessionStore

    documents_dir = args.documents_dir or config.documents_dir
    return SessionStore(documents_dir, indent=config.json_indent)


# =============================================================================
# CLI Command Handlers
# =============================================================================


def cmd_create(args: argparse.Namespace) -> int:
    """Handle create command."""
    from tmuxph.session import CreationRequest
    from tmuxph.workflows import create_session

    config = _load_app_config(args)
    store = _make_store(args, config)

    request = CreationRequest(
        session_name=args.session_name,
        start_directory=Path(args.directory).expanduser().resolve(),
        focus=args.focus,
        window_descriptors=args.windows_description or [],
        use_defaults=args.default,
        default_window_name=config.default_window.name,
        default_command=config.default_window.command,
        default_automatic_rename=config.default_window.automatic_rename,
    )
    session = create_session(request)

    if args.dump:
        store.dump(session)
    else:
        path = store.save(session)
        print(f"Created session {session.name!r}: {path}")
    return 0


def cmd_edit(args: argparse.Namespace) -> int:
    """Handle edit command."""
    from tmuxph.prompts import ConsolePrompter, PresetPrompter
    from tmuxph.workflows import EditRequest, edit_session

    config = _load_app_config(args)
    store = _make_store(args, config)
    session = store.load(args.name)

    if args.drop or args.add:
        prompter = PresetPrompter(drops=args.drop, additions=args.add)
    else:
        prompter = ConsolePrompter(Console(stderr=True))

    request = EditRequest(
        window_index=args.window_ind,
        layout=args.layout,
        window_name=args.window_name,
        start_directory=Path(args.start_directory).expanduser()
        if args.start_directory
        else None,
        focus_window=args.focus,
        focused_pane=args.focus_pane,
        commands=args.commands or [],
    )
    edited = edit_session(session, request, prompter, config.default_window)

    if args.dump:
        store.dump(edited)
    else:
        path = store.save(edited)
        print(f"Updated session {edited.name!r}: {path}")
    return 0


def cmd_panes(args: argparse.Namespace) -> int:
    """Handle panes command."""
    from tmuxph.layout import count_layout_panes

    print(count_layout_panes(args.layout))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle show command."""
    from tmuxph.codec import encode_session

    config = _load_app_config(args)
    store = _make_store(args, config)
    session = store.load(args.name)

    if args.json:
        print(json.dumps(encode_session(session), indent=2))
        return 0

    console = Console()
    table = Table(title=f"{session.name} ({session.start_directory})")
    table.add_column("#", justify="right")
    table.add_column("Window")
    table.add_column("Focus")
    table.add_column("Directory")
    table.add_column("Panes")
    table.add_column("Layout")
    for n, window in enumerate(session.windows):
        panes = "\n".join(
            f"* {cmd}" if i == window.panes.focused_index else f"  {cmd}"
            for i, cmd in enumerate(window.panes.commands())
        )
        table.add_row(
            str(n),
            window.name,
            "yes" if window.focus else "",
            str(window.start_directory),
            panes,
            window.layout or "-",
        )
    console.print(table)
    return 0


# =============================================================================
# Argument Parser Setup
# =============================================================================


def _create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="tmuxph",
        description="Manages tmuxp JSON session files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Window description format:
  NAME:STARTDIR:AUTORENAME:FOCUSED_PANE:PANE0:<PANE1>:<etc...>[LAYOUT#PANEn]

Example:
  code:./src/:off:0:nvim:cargo-watch -c:clear && bash
""",
    )

    # Global arguments
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to console",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set log level (default: INFO)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Disable logging to file",
    )
    parser.add_argument(
        "--log-file",
        help="Log file to use (default: ~/.config/tmuxph/logs/tmuxph.log)",
    )
    parser.add_argument(
        "--config",
        help="Path to the configuration file",
    )
    parser.add_argument(
        "--documents-dir",
        help="Directory holding tmuxp session files (default: ~/.tmuxp)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # create
    create_parser = subparsers.add_parser(
        "create",
        help="Create a tmuxp session file",
    )
    create_parser.add_argument(
        "-n",
        "--session-name",
        required=True,
        help="The name of the tmux session to create",
    )
    create_parser.add_argument(
        "-d",
        "--directory",
        required=True,
        help="The directory where the tmux session will be launched",
    )
    create_parser.add_argument(
        "-f",
        "--focus",
        type=int,
        default=0,
        help="The number of the window to focus (default: 0)",
    )
    create_parser.add_argument(
        "-w",
        "--windows-description",
        action="append",
        help="A window description, can be passed multiple times",
    )
    create_parser.add_argument(
        "-D",
        "--default",
        action="store_true",
        help='Create a default "bash" session',
    )
    create_parser.add_argument(
        "-o",
        "--dump",
        action="store_true",
        help="Print the document to stdout instead of writing the file",
    )

    # edit
    edit_parser = subparsers.add_parser(
        "edit",
        help="Edit a window of an existing tmuxp session file",
    )
    edit_parser.add_argument(
        "-n",
        "--name",
        required=True,
        help="The name of the session to edit",
    )
    edit_parser.add_argument(
        "-i",
        "--window-ind",
        type=int,
        required=True,
        help="The window to modify (a new window is added if it does not exist)",
    )
    edit_parser.add_argument(
        "-l",
        "--layout",
        help="The tmux layout to apply to the window",
    )
    edit_parser.add_argument(
        "-w",
        "--window-name",
        help="The window name to use",
    )
    edit_parser.add_argument(
        "--start-directory",
        help="The window start directory",
    )
    edit_parser.add_argument(
        "--focus",
        action="store_true",
        help="Make this the focused window",
    )
    edit_parser.add_argument(
        "--focus-pane",
        type=int,
        help="Index of the pane to focus",
    )
    edit_parser.add_argument(
        "--commands",
        nargs="+",
        help="Replace the pane commands",
    )
    edit_parser.add_argument(
        "--drop",
        type=int,
        action="append",
        help="Pane index to drop when the layout has fewer panes (repeatable)",
    )
    edit_parser.add_argument(
        "--add",
        action="append",
        help="Command to add when the layout has more panes (repeatable)",
    )
    edit_parser.add_argument(
        "-d",
        "--dump",
        action="store_true",
        help="Print the document to stdout instead of writing the file",
    )

    # panes
    panes_parser = subparsers.add_parser(
        "panes",
        help="Print the number of panes a tmux layout describes",
    )
    panes_parser.add_argument("layout", help="tmux layout string")

    # show
    show_parser = subparsers.add_parser(
        "show",
        help="Show a tmuxp session file",
    )
    show_parser.add_argument(
        "-n",
        "--name",
        required=True,
        help="The name of the session to show",
    )
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    return parser


COMMANDS = {
    "create": cmd_create,
    "edit": cmd_edit,
    "panes": cmd_panes,
    "show": cmd_show,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tmuxph command."""
    from tmuxph.exceptions import TmuxphError, record_error
    from tmuxph.logging_config import log_exception

    parser = _create_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    _setup_logging(args)

    try:
        return handler(args)
    except TmuxphError as e:
        record_error(e)
        log_exception(logger, e, f"{args.command} failed", include_traceback=args.debug)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
