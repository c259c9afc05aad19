import argparse
import json
import logging
import os
import sys
from dotenv import load_dotenv

from mcp_bins.bin_collection_handler import BinCollectionHandler, parse_uprn
from mcp_bins.data_fetchers.fetcher_factory import DEFAULT_SOURCE, create_fetcher
from mcp_bins.exceptions import BinsError
from mcp_bins.log_setup import configure_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    load_dotenv()
    parser = argparse.ArgumentParser(description="Check the Reading bin collection schedule once.")
    parser.add_argument("--uprn", "-u", default=os.environ.get("MY_UPRN"),
                        help="UPRN of the address (defaults to MY_UPRN env var).")
    parser.add_argument("--json", "-j", action="store_true",
                        help="Print the raw collections as JSON instead of the formatted text.")
    parser.add_argument("--source", default=os.environ.get("FETCHER_SOURCE", DEFAULT_SOURCE),
                        help="Data source.")
    args = parser.parse_args(argv)

    configure_logging(os.environ.get("LOG_LEVEL", "WARNING"), os.environ.get("BINS_LOG_FILE"))

    try:
        fetcher = create_fetcher(source=args.source)
    except ValueError as e:
        logger.error(f"Fetcher creation failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    handler = BinCollectionHandler(fetcher, default_uprn=args.uprn)
    try:
        if args.json:
            uprn = parse_uprn(handler.resolve_uprn({}))
            result = fetcher.get_collections(uprn)
            print(json.dumps(result.collections_as_dicts(), indent=4, ensure_ascii=False))
        else:
            print(handler.handle({}))
    except BinsError as e:
        logger.error(f"Bin collection check failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
