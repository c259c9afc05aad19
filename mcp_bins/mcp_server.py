import argparse
import logging
import os
import sys
from typing import Annotated, Optional, Union

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from mcp_bins.bin_collection_handler import BinCollectionHandler
from mcp_bins.data_fetchers.base_fetcher import BinDataFetcher
from mcp_bins.data_fetchers.fetcher_factory import DEFAULT_SOURCE, create_fetcher
from mcp_bins.exceptions import BinsError
from mcp_bins.log_setup import configure_logging

SERVER_NAME = "mcp-bins"
SERVER_VERSION = "1.0.0"
TOOL_NAME = "bin-collection"
TOOL_DESCRIPTION = "Get bin collection dates for a Reading address using UPRN"

logger = logging.getLogger(__name__)


def build_uprn_description(default_uprn: Optional[str]) -> str:
    description = "Unique Property Reference Number (UPRN) for the address"
    if default_uprn:
        description += f" (default: {default_uprn})"
    return description


def call_bin_collection(handler: BinCollectionHandler, uprn: Optional[Union[str, int]]) -> str:
    """Runs one bin-collection call, reporting handler errors to the client as tool errors."""
    logger.info(f"{TOOL_NAME} called with uprn={uprn!r}")
    try:
        text = handler.handle({"uprn": uprn})
    except BinsError as e:
        logger.error(f"{TOOL_NAME} failed: {e}")
        raise ToolError(str(e)) from e
    logger.info(f"{TOOL_NAME} succeeded for uprn={uprn or handler.default_uprn!r}")
    return text


def create_server(default_uprn: Optional[str] = None, fetcher: Optional[BinDataFetcher] = None) -> FastMCP:
    """Builds the MCP server with the bin-collection tool registered."""
    if fetcher is None:
        fetcher = create_fetcher(os.environ.get("FETCHER_SOURCE", DEFAULT_SOURCE))
    handler = BinCollectionHandler(fetcher, default_uprn=default_uprn)

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    uprn_description = build_uprn_description(default_uprn)

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def bin_collection(
        # Non-string values reach the handler, which falls back to the default UPRN
        uprn: Annotated[Optional[Union[str, int]], Field(description=uprn_description)] = None,
    ) -> str:
        return call_bin_collection(handler, uprn)

    return mcp


def main(argv=None):
    load_dotenv()
    parser = argparse.ArgumentParser(description="MCP server for Reading bin collection dates.")
    parser.add_argument("--uprn", default=os.environ.get("MY_UPRN"),
                        help="Default UPRN for bin collection queries (defaults to MY_UPRN env var).")
    parser.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "INFO"),
                        help="Logging level (defaults to LOG_LEVEL env var, then INFO).")
    args = parser.parse_args(argv)

    configure_logging(args.log_level, os.environ.get("BINS_LOG_FILE"))
    logger.info(f"Starting {SERVER_NAME} {SERVER_VERSION} (default UPRN: {args.uprn or 'none'})")

    try:
        server = create_server(default_uprn=args.uprn)
        server.run()
    except Exception as e:
        logger.critical(f"{SERVER_NAME} failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
