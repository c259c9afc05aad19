import logging
import re
from datetime import datetime
from typing import Any, Callable, Mapping, Optional
from .data_fetchers.base_fetcher import BinDataFetcher
from .exceptions import ValidationError
from .formatter import format_collections

logger = logging.getLogger(__name__)

UPRN_PATTERN = re.compile(r"[0-9]+")
MAX_UPRN = 2**63 - 1


def parse_uprn(uprn_text: str) -> int:
    """Parses a UPRN given as text, raising ValidationError if it is not a plain non-negative integer."""
    if not UPRN_PATTERN.fullmatch(uprn_text):
        raise ValidationError(f"uprn must be a valid number: {uprn_text!r} is not an integer")
    uprn = int(uprn_text)
    if uprn > MAX_UPRN:
        raise ValidationError(f"uprn must be a valid number: {uprn_text!r} is out of range")
    return uprn


class BinCollectionHandler:
    """
    Handles calls to the bin-collection tool.

    The default UPRN is fixed when the handler is built and is only used when
    the caller does not supply one.
    """

    def __init__(self, fetcher: BinDataFetcher, default_uprn: Optional[str] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self._fetcher = fetcher
        self._default_uprn = default_uprn or None
        self._clock = clock

    @property
    def default_uprn(self) -> Optional[str]:
        return self._default_uprn

    def resolve_uprn(self, arguments: Optional[Mapping[str, Any]]) -> str:
        uprn_text = (arguments or {}).get("uprn")
        if isinstance(uprn_text, str) and uprn_text:
            return uprn_text
        if self._default_uprn:
            logger.info(f"No UPRN supplied, using default UPRN {self._default_uprn}")
            return self._default_uprn
        raise ValidationError("uprn argument is required")

    def handle(self, arguments: Optional[Mapping[str, Any]]) -> str:
        """
        Fetches and formats the bin collections for the UPRN in the arguments.

        Raises:
            BinsError: For a missing/invalid UPRN or when the council API call fails.
        """
        uprn_text = self.resolve_uprn(arguments)
        uprn = parse_uprn(uprn_text)
        result = self._fetcher.get_collections(uprn)
        return format_collections(uprn_text, result, self._clock())
