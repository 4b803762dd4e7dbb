from enum import Enum


class Period(str, Enum):
    TWELVE_MONTHS = "12mo"
    SIX_MONTHS = "6mo"
    MONTH = "month"
    THIRTY_DAYS = "30d"
    SEVEN_DAYS = "7d"
    DAY = "day"
    CUSTOM = "custom"


class Interval(str, Enum):
    DATE = "date"
    MONTH = "month"
