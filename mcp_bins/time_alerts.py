import logging
from datetime import datetime

logger = logging.getLogger(__name__)

# Council API format, e.g. "05/02/2020 00:00:00"
COLLECTION_DATE_FORMAT = "%d/%m/%Y %H:%M:%S"
# Collections usually happen around 9AM
COLLECTION_HOUR = 9
WARNING_START_HOUR = 7

SOON_ALERT = " ⚠️ Collection is soon (around 9AM)!"
PASSED_ALERT = " ⚠️ Collection may have already happened (around 9AM)!"


def get_time_alert(collection_date: str, now: datetime) -> str:
    """
    Returns an alert to append to the date line when the collection is today.

    Args:
        collection_date: The collection date as sent by the council API.
        now: The reference time to compare against.

    Returns:
        The alert text (with a leading space), or "" when no alert applies or
        the date cannot be parsed.
    """
    try:
        collection_dt = datetime.strptime(collection_date, COLLECTION_DATE_FORMAT)
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not parse collection date '{collection_date}': {e}")
        return ""

    if collection_dt.date() != now.date():
        return ""

    if WARNING_START_HOUR <= now.hour < COLLECTION_HOUR:
        return SOON_ALERT
    if now.hour >= COLLECTION_HOUR:
        return PASSED_ALERT
    return ""
