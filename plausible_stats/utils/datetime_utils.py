from datetime import date

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.model.query_model import DateRange

DATE_FORMAT = "%Y-%m-%d"


def format_date(value: date) -> str:
    """
    Format a day the way the Stats API expects it.
    Example: "2024-03-01"
    """
    return value.strftime(DATE_FORMAT)


def format_date_range(date_range: DateRange) -> str:
    """
    Example: "1970-01-01,2050-01-01"
    """
    return AppConstants.LIST_SEPARATOR.join(
        (format_date(date_range.from_date), format_date(date_range.to_date))
    )
