"""CLI entry point — dispatches filesort subcommands."""
import argparse
import sys


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("names", nargs="*", help="Filenames to classify")
    p.add_argument("--from", dest="from_file", default=None, metavar="FILE",
                   help="Read filenames from FILE, one per line ('-' for stdin)")
    p.add_argument("--demo", action="store_true",
                   help="Classify the built-in demonstration list")
    p.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    p.add_argument("--remote", action="store_true",
                   help="Classify on the configured filesort server")
    p.add_argument("--quiet", action="store_true", help="Suppress the progress bar")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filesort",
        description="Classify filenames by extension and report by priority",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    # filesort classify
    p_classify = sub.add_parser("classify", help="Classify filenames and print the sorted report")
    _add_input_args(p_classify)

    # filesort stats
    p_stats = sub.add_parser("stats", help="Print only the distribution statistics")
    _add_input_args(p_stats)

    # filesort categories
    p_cats = sub.add_parser("categories", help="Show the extension → category table")
    p_cats.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # filesort server
    p_server = sub.add_parser("server", help="Start the filesort server")
    p_server.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    p_server.add_argument("--port", type=int, default=8766, help="Port (default: 8766)")
    p_server.add_argument("--reload", action="store_true", help="Enable auto-reload (dev only)")

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "classify":
            from filesort.commands.classify import cmd_classify
            cmd_classify(args)
        elif args.command == "stats":
            from filesort.commands.classify import cmd_stats
            cmd_stats(args)
        elif args.command == "categories":
            from filesort.commands.categories import cmd_categories
            cmd_categories(args)
        elif args.command == "server":
            from filesort.commands.server import cmd_server
            cmd_server(args)
        else:
            parser.print_help()
            sys.exit(1)
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        sys.exit(130)


if __name__ == "__main__":
    main()
