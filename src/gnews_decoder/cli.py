"""Command line entry point for decoding Google News URLs."""

import argparse
import logging
import sys

from .config import DEFAULT_TIMEOUT, BatchConfig, ClientConfig
from .decoder import GoogleNewsDecoder
from .logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.

    Returns:
        Parser for single-URL and CSV batch modes
    """
    parser = argparse.ArgumentParser(
        prog="gnews-decoder", description="Decode Google News RSS links into publisher article URLs."
    )
    parser.add_argument("urls", nargs="*", help="Google News article or RSS URLs")
    parser.add_argument("--interval-ms", type=int, default=0, help="delay after each successful decode")
    parser.add_argument("--proxy-host", help="HTTP proxy host")
    parser.add_argument("--proxy-port", type=int, help="HTTP proxy port")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="request timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")

    batch = parser.add_argument_group("CSV batch mode")
    batch.add_argument("--input-csv", help="CSV file with URLs to decode")
    batch.add_argument("--output-csv", help="where to write the decoded CSV")
    batch.add_argument("--id-column", default="id", help="identifier column (default: id)")
    batch.add_argument("--url-columns", nargs="+", default=["url"], help="columns holding URLs")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments to parse. Defaults to sys.argv.

    Returns:
        Exit status, 1 if any URL failed to decode
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.input_csv) != bool(args.output_csv):
        parser.error("--input-csv and --output-csv must be used together")
    if not args.urls and not args.input_csv:
        parser.error("provide at least one URL or --input-csv")

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = ClientConfig(proxy_host=args.proxy_host, proxy_port=args.proxy_port, timeout=args.timeout)
    except ValueError as e:
        parser.error(str(e))
    decoder = GoogleNewsDecoder(config)

    if args.input_csv:
        try:
            decoder.process_csv(
                args.input_csv,
                args.output_csv,
                BatchConfig(id_column=args.id_column, url_columns=args.url_columns),
                interval_ms=args.interval_ms,
            )
        except ValueError as e:
            parser.error(str(e))
        return 0

    failed = False
    for url in args.urls:
        result = decoder.decode(url, interval_ms=args.interval_ms)
        if result.ok:
            print(result.decoded_url)
        else:
            failed = True
            print(f"ERROR: {result.message}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
