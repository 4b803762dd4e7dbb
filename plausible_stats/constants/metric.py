from enum import Enum


class Metric(str, Enum):
    VISITORS = "visitors"
    VISITS = "visits"
    PAGEVIEWS = "pageviews"
    VIEWS_PER_VISIT = "views_per_visit"
    BOUNCE_RATE = "bounce_rate"
    VISIT_DURATION = "visit_duration"
    EVENTS = "events"
    CONVERSION_RATE = "conversion_rate"
    TIME_ON_PAGE = "time_on_page"
