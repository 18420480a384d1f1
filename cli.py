"""CLI implementation for PDFer."""
import argparse
import sys
import logging
from pathlib import Path

from core import (
    config, APP_DATA_DIR, NotFoundError, RenderError, DocumentRenderer,
    derive_display_name, format_timestamp, get_display_path, open_library, open_path_in_os
)
from application_state import init_app_state, setup_logging


def _print_records(records):
    if not records:
        print("No recent documents")
        return
    print(f"Recent documents ({len(records)}):")
    for i, r in enumerate(records):
        opened = format_timestamp(r.last_read)
        print(f"  {i}: {r.display_name}  [page {r.page_num + 1}, {opened}]")
        print(f"     {get_display_path(r.filepath)}")


def run_cli():
    """Run in CLI mode with subcommands."""
    init_app_state()

    # CLI uses standard logging to stderr, plus core logging setup
    setup_logging(enable_gui=False)
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    logging.getLogger().addHandler(console)

    parser = argparse.ArgumentParser(
        description="PDFer - lightweight PDF viewer with notes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Subcommands:
  recent    List recent documents, most recent first
  count     Print the number of recent documents
  open      Add a document to the library (or refresh it)
  rename    Change the display name of a document
  delete    Remove a document from the library
  config    Manage configuration

Run without arguments to start the viewer.

Examples:
  pdfer open ~/papers/paper.pdf --name "Paper" --page 12
  pdfer rename ~/papers/paper.pdf "Chapter 1"
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("recent", help="List recent documents")
    subparsers.add_parser("count", help="Print the number of recent documents")

    open_parser = subparsers.add_parser("open", help="Add a document to the library")
    open_parser.add_argument("path", help="Path to the PDF")
    open_parser.add_argument("-n", "--name", default="", help="Display name")
    open_parser.add_argument("-p", "--page", type=int, help="Page to remember (1-based)")

    rename_parser = subparsers.add_parser("rename", help="Rename a document")
    rename_parser.add_argument("path", help="Path of the registered document")
    rename_parser.add_argument("name", help="New display name")

    delete_parser = subparsers.add_parser("delete", help="Remove a document from the library")
    delete_parser.add_argument("path", help="Path of the registered document")

    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--path", action="store_true", help="Print the AppData folder path")
    config_parser.add_argument("--open", action="store_true", help="Open the AppData folder")
    config_parser.add_argument("--theme", choices=["light", "dark"], help="Set the UI theme")
    config_parser.add_argument("--database", help="Set the library snapshot path")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    if args.command == "config":
        if args.theme:
            config.set_theme(args.theme)
            print(f"Theme set to {args.theme}")
        if args.database:
            config.set_database_path(args.database)
            print(f"Library snapshot: {args.database}")
        if args.path:
            print(str(APP_DATA_DIR))
        if args.open:
            open_path_in_os(APP_DATA_DIR)
            print(f"Opened: {APP_DATA_DIR}")
        return

    library = open_library(config.database_path)

    if args.command == "recent":
        _print_records(library.list_recent())

    elif args.command == "count":
        print(library.count_recent())

    elif args.command == "open":
        path = Path(args.path)
        if not path.is_file():
            print(f"Error: File not found: {args.path}", file=sys.stderr)
            sys.exit(1)
        filepath = str(path.resolve())
        record = library.open_new(filepath, args.name or derive_display_name(filepath))
        if args.page is not None:
            try:
                total = DocumentRenderer().page_count(filepath)
            except RenderError as e:
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)
            library.go_to_page(args.page - 1, total)
        if not library.close_and_persist():
            print("Error: Could not save the library", file=sys.stderr)
            sys.exit(1)
        print(f"Added: {record.display_name}")

    elif args.command in ("rename", "delete"):
        filepath = str(Path(args.path).resolve())
        try:
            if args.command == "rename":
                library.rename(filepath, args.name)
                print(f"Renamed: {args.name}")
            else:
                library.delete(filepath)
                print(f"Removed: {get_display_path(filepath)}")
        except NotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if not library.persist():
            print("Error: Could not save the library", file=sys.stderr)
            sys.exit(1)
