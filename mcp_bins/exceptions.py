class BinsError(Exception):
    """Base class for errors reported back to the caller of the bin-collection tool."""


class ValidationError(BinsError):
    """The UPRN argument is missing or is not a number."""


class FetchError(BinsError):
    """The council API could not be reached."""


class UpstreamStatusError(BinsError):
    """The council API answered with a non-200 status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API request failed with status {status_code}")


class DecodeError(BinsError):
    """The council API answered with a body that is not the expected JSON."""
