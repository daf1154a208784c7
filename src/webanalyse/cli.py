"""Command-line interface for the page analyser."""

import json
import sys

from webanalyse.analyzer import PageAnalyzer, error_message
from webanalyse.config import Config
from webanalyse.exceptions import WebAnalyseError
from webanalyse.logging_config import setup_logging
from webanalyse.models import PageSummary


def print_summary(summary: PageSummary, file=None):
    """Print a page summary in a formatted way.

    Args:
        summary: PageSummary to print
        file: Stream to write to (stdout if None)
    """
    file = file or sys.stdout
    print(f"\n{'=' * 60}", file=file)
    print(f"Summary for: {summary.url}", file=file)
    print(f"{'=' * 60}", file=file)
    print(f"  • Title: {summary.title}", file=file)
    print(f"  • HTML version: {summary.version}", file=file)
    print(f"  • Has login form: {'Yes' if summary.has_login else 'No'}", file=file)

    print(f"\nLinks:", file=file)
    print(f"  • Internal: {summary.links.internal}", file=file)
    print(f"  • External: {summary.links.external}", file=file)
    print(f"  • Inaccessible: {summary.links.inaccessible}", file=file)

    if summary.headings:
        print(f"\nHeadings:", file=file)
        for tag, count in sorted(summary.headings.items()):
            print(f"  • {tag}: {count}", file=file)

    print(f"\n{'=' * 60}\n", file=file)


def analyse_command(args, config: Config):
    """Analyse a single URL."""
    analyzer = PageAnalyzer(config)

    try:
        summary = analyzer.analyse(args.url)
    except WebAnalyseError as e:
        print(f"Error: {error_message(e, args.url)}")
        sys.exit(1)

    if args.output == "json":
        output = json.dumps(summary.to_dict(), indent=2)
        if args.output_file:
            with open(args.output_file, "w") as f:
                f.write(output)
            print(f"Results written to {args.output_file}")
        else:
            print(output)
    elif args.output_file:
        with open(args.output_file, "w") as f:
            print_summary(summary, file=f)
        print(f"Results written to {args.output_file}")
    else:
        print_summary(summary)


def serve_command(args, config: Config):
    """Run the web front-end."""
    from webanalyse.server import run_server

    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    run_server(config)


def main(argv=None):
    """Main CLI entry point."""
    import argparse

    config = Config.from_env()

    parser = argparse.ArgumentParser(
        description="Web Analyse - Summarise a web page and check its links"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Set logging verbosity (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-file",
        default=config.log_file,
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyse_parser = subparsers.add_parser(
        "analyse", help="Analyse a single URL."
    )
    analyse_parser.add_argument("url", help="URL of the page to analyse")
    analyse_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    analyse_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )
    analyse_parser.add_argument(
        "--probe-timeout",
        type=float,
        help=f"Timeout for each external link check in seconds (default: {config.probe_timeout})",
    )
    analyse_parser.add_argument(
        "--max-workers",
        type=int,
        help=f"Concurrent link checks (default: {config.max_workers})",
    )
    analyse_parser.set_defaults(func=analyse_command)

    serve_parser = subparsers.add_parser(
        "serve", help="Run the web front-end."
    )
    serve_parser.add_argument("--host", help=f"Bind address (default: {config.host})")
    serve_parser.add_argument("--port", type=int, help=f"Port (default: {config.port})")
    serve_parser.set_defaults(func=serve_command)

    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level or config.log_level,
        log_file=args.log_file,
    )

    if getattr(args, "probe_timeout", None):
        config.probe_timeout = args.probe_timeout
    if getattr(args, "max_workers", None):
        config.max_workers = max(1, args.max_workers)

    if hasattr(args, "func"):
        args.func(args, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
