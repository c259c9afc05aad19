import abc
from ..data_models import CollectionsResult


class BinDataFetcher(abc.ABC):
    """Abstract base class for fetching bin collection data."""

    @abc.abstractmethod
    def get_collections(self, uprn: int) -> CollectionsResult:
        """
        Fetches the upcoming bin collections for a property.

        Args:
            uprn: The Unique Property Reference Number of the address.

        Returns:
            A CollectionsResult with the collections in the order the source returned them.

        Raises:
            FetchError: If the source could not be reached.
            UpstreamStatusError: If the source answered with an error status.
            DecodeError: If the source's answer could not be decoded.
        """
        pass
