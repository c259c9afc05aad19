import logging
import requests
from typing import Optional
from .base_fetcher import BinDataFetcher
from ..data_models import CollectionsResult
from ..exceptions import DecodeError, FetchError, UpstreamStatusError

# --- Configuration ---
BASE_URL = "https://api.reading.gov.uk"
COLLECTIONS_URL = f"{BASE_URL}/rbc/mycollections/{{uprn:d}}"
REQUEST_TIMEOUT = 10  # seconds

logger = logging.getLogger(__name__)


class ReadingBinData(BinDataFetcher):
    """Fetches bin collection data from the Reading Borough Council API."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = REQUEST_TIMEOUT):
        # Anything with requests.Session's get(url, timeout=...) will do
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def get_collections(self, uprn: int) -> CollectionsResult:
        url = COLLECTIONS_URL.format(uprn=uprn)
        logger.info(f"Requesting bin collections from {url}")
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(f"failed to fetch bin collection data: {e}") from e

        try:
            if response.status_code != 200:
                logger.warning(f"Council API returned status {response.status_code} for UPRN {uprn}")
                raise UpstreamStatusError(response.status_code)
            try:
                result = CollectionsResult.from_api_payload(response.json())
            except (ValueError, TypeError) as e:
                # requests' JSONDecodeError is a ValueError
                logger.error(f"Could not decode council API response for UPRN {uprn}: {e}")
                raise DecodeError(f"failed to decode API response: {e}") from e
        finally:
            response.close()

        logger.info(f"Council API returned {len(result.collections)} collections for UPRN {uprn}")
        return result
