"""
Main CLI for the swatchbook tool.

Renders palettes of CSS custom-property colors and regenerates hex themes
with hue-relative HSL definitions.
"""

from __future__ import annotations

import argparse
import sys

from .utils import configure_logging, log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Stylesheet selection and resolution options shared by all commands."""
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--css",
        help="Stylesheet path (default: themes/hex.css)",
    )
    source.add_argument(
        "--query",
        help="Page query string carrying the path, e.g. '?css=themes/hsl.css'",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of falling back to the default theme when no path is given",
    )
    parser.add_argument(
        "--resolver",
        choices=["static", "browser"],
        default="static",
        help="Resolve values in Python (static) or in headless Chromium (browser)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        choices=[0, 1],
        default=0,
        help="Decimals for HSL saturation/lightness (default: 0)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""

    parser = argparse.ArgumentParser(
        prog="swatchbook",
        description="Palette viewer for CSS custom-property color themes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  render        Render the palette page as HTML
  list          Print properties and their colors as a table
  generate-hsl  Print a hue-relative HSL rewrite of a hex theme

Examples:
  swatchbook render --output palette.html          # Built-in hex theme
  swatchbook render --query '?css=themes/hsl.css'  # Path from a query string
  swatchbook list --css theme.css --precision 1    # Refined HSL percents
  swatchbook generate-hsl --wrap                   # Paste-ready :root block
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log diagnostics (including generated HSL ranges) to stderr",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (default: ./swatchbook.yaml when present)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- render ---
    render_parser = subparsers.add_parser(
        "render",
        help="Render the palette page as HTML",
        description="Render one swatch per custom property of the stylesheet's first rule.",
    )
    _add_source_arguments(render_parser)
    render_parser.add_argument(
        "--output", "-o",
        help="Write the page to this file instead of stdout",
    )
    render_parser.add_argument(
        "--tooltips",
        action="store_true",
        help="Add the rendered 8-digit hex of each swatch as a tooltip",
    )

    # --- list ---
    list_parser = subparsers.add_parser(
        "list",
        help="Print properties and their colors as a table",
        description="Print each custom property with its value and HSL form.",
    )
    _add_source_arguments(list_parser)
    list_parser.add_argument(
        "--tooltips",
        action="store_true",
        help="Include the rendered 8-digit hex of each swatch",
    )

    # --- generate-hsl ---
    generate_parser = subparsers.add_parser(
        "generate-hsl",
        help="Print a hue-relative HSL rewrite of a hex theme",
        description="Group colors by family, average each family's hue and print "
                    "every shade as an offset from it.",
    )
    _add_source_arguments(generate_parser)
    generate_parser.add_argument(
        "--wrap",
        action="store_true",
        help="Wrap the declarations in a :root block",
    )

    return parser


# =============================================================================
# Command Dispatch
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        log.set_color(False)

    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "render":
            from .commands import cmd_render
            return cmd_render(args)

        elif args.command == "list":
            from .commands import cmd_list
            return cmd_list(args)

        elif args.command == "generate-hsl":
            from .commands import cmd_generate_hsl
            return cmd_generate_hsl(args)

        else:
            log.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        log.warning("\nInterrupted")
        return 130
    except Exception as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
