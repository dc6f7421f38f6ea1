"""
CLI entry point for the Inventory Editor.

Usage:
    python -m inventory_editor stock.xlsx search SKU001
    python -m inventory_editor stock.xlsx set-quantity WAREHOUSE 2 47
    python -m inventory_editor stock.xlsx highlight CIGARS 3 --on
    python -m inventory_editor stock.xlsx header "Sam"

Edits are written to <stem>_modified.xlsx unless --output is given.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG_PATH, load_config
from .editor import InventoryEditor
from .locator import SearchScope
from .models import OutcomeKind
from .workbook import OpenpyxlDocument, modified_filename

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inventory_editor",
        description="Inventory Editor - search SKUs, adjust quantities and flag low stock",
    )

    parser.add_argument("workbook", metavar="FILE", help="Workbook to edit (XLSX)")

    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Editor config file (default: module's editor_config.json)",
    )

    parser.add_argument(
        "--output",
        metavar="FILE",
        help="Where to write the edited workbook (default: <stem>_modified.xlsx)",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only print errors",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Find rows by SKU")
    search.add_argument("sku")
    scope = search.add_mutually_exclusive_group()
    scope.add_argument("--all-sheets", dest="all_sheets", action="store_true", default=None)
    scope.add_argument("--single-sheet", dest="all_sheets", action="store_false")
    search.add_argument(
        "--exclude",
        nargs="+",
        default=None,
        metavar="SHEET",
        help="Sheet names to skip in multi-sheet search",
    )

    quantity = commands.add_parser("set-quantity", help="Save a new quantity with an audit entry")
    quantity.add_argument("sheet")
    quantity.add_argument("row", type=int)
    quantity.add_argument("quantity")

    highlight = commands.add_parser("highlight", help="Toggle the low-stock highlight")
    highlight.add_argument("sheet")
    highlight.add_argument("row", type=int)
    state = highlight.add_mutually_exclusive_group()
    state.add_argument("--on", dest="on", action="store_true", default=None)
    state.add_argument("--off", dest="on", action="store_false")

    header = commands.add_parser("header", help="Stamp the header cell with date and name")
    header.add_argument("name")

    return parser


def _print_matches(editor: InventoryEditor, outcome) -> None:
    print(outcome.message)
    for match in outcome.matches:
        flag = " [LOW STOCK]" if editor.is_highlighted(match.sheet_name, match.row_number) else ""
        print(
            f"  Sheet: {match.sheet_name} | Row: {match.row_number} | "
            f"SKU: {match.sku} | Qty: {match.quantity if match.quantity != '' else 0}{flag}"
        )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    workbook_path = Path(args.workbook)
    if not workbook_path.exists():
        print(f"Error: Workbook not found: {workbook_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(config_path)
        document = OpenpyxlDocument.load(workbook_path)
        editor = InventoryEditor(document, config)

        if args.command == "search":
            if args.exclude is not None:
                config.set_excluded_sheets(args.exclude)
            scope = None
            if args.all_sheets is not None:
                scope = SearchScope.ALL_SHEETS if args.all_sheets else SearchScope.SINGLE_SHEET
            outcome = editor.search(args.sku, scope)
        elif args.command == "set-quantity":
            outcome = editor.save_quantity(args.sheet, args.row, args.quantity)
        elif args.command == "highlight":
            outcome = editor.toggle_highlight(args.sheet, args.row, args.on)
        else:
            outcome = editor.update_header(args.name)

        if not outcome.ok:
            print(f"Error: {outcome.message}", file=sys.stderr)
            sys.exit(1)

        if args.command == "search":
            if not args.quiet:
                _print_matches(editor, outcome)
            return

        output_path = Path(args.output) if args.output else (
            workbook_path.with_name(modified_filename(workbook_path.name))
        )
        document.save(output_path)

        if not args.quiet:
            print(outcome.message)
            if outcome.kind is OutcomeKind.AUDIT_SLOT_UNAVAILABLE:
                print("Warning: no audit entry was written", file=sys.stderr)
            print(f"Saved to: {output_path}")

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
