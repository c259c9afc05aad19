import logging
import requests
from typing import Optional
from .base_fetcher import BinDataFetcher
from .reading_bin_data import ReadingBinData

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "reading"


def create_fetcher(source: str = DEFAULT_SOURCE, session: Optional[requests.Session] = None) -> BinDataFetcher:
    """
    Factory function to create the appropriate BinDataFetcher instance.

    Args:
        source: The identifier for the data source (e.g., "reading").
        session: Optional HTTP session handed to the fetcher.

    Returns:
        An instance conforming to the BinDataFetcher interface.

    Raises:
        ValueError: If the specified source is unknown.
    """
    logger.info(f"Creating fetcher for source: '{source}'")

    if source.lower() == "reading":
        return ReadingBinData(session=session)
    # --- Add other councils here using elif ---

    logger.error(f"Unknown data source requested: {source}")
    raise ValueError(f"Unknown data source: {source}")
