from datetime import datetime
from .bin_classifier import classify_service
from .data_models import CollectionsResult
from .time_alerts import get_time_alert


def format_collections(uprn_text: str, result: CollectionsResult, now: datetime) -> str:
    """Renders the collections for a UPRN as the text returned by the bin-collection tool."""
    if not result.collections:
        return f"No upcoming bin collections found for UPRN {uprn_text}"

    lines = [f"Upcoming bin collections for UPRN {uprn_text}:\n\n"]
    for collection in result.collections:
        category = classify_service(collection.service)
        time_alert = get_time_alert(collection.date, now)
        lines.append(
            f"📅 {collection.date} ({collection.day}){time_alert}\n"
            f"   {category.emoji} {collection.service} ({category.colour} bin)\n\n"
        )
    return "".join(lines)
