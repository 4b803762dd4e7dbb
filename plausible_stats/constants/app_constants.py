class AppConstants:
    DEFAULT_BASE_URL = "https://plausible.io"
    DEFAULT_TIMEOUT = 30.0

    # endpoints
    REALTIME_VISITORS_PATH = "api/v1/stats/realtime/visitors"
    AGGREGATE_PATH = "api/v1/stats/aggregate"
    TIMESERIES_PATH = "api/v1/stats/timeseries"
    BREAKDOWN_PATH = "api/v1/stats/breakdown"

    # query params
    SITE_ID = "site_id"
    PERIOD = "period"
    METRICS = "metrics"
    COMPARE = "compare"
    FILTERS = "filters"
    DATE = "date"
    INTERVAL = "interval"
    PROPERTY = "property"
    LIMIT = "limit"
    PAGE = "page"
    COMPARE_PREVIOUS_PERIOD = "previous_period"

    # response keys
    RESULTS = "results"
    ERROR = "error"
    VALUE = "value"
    CHANGE = "change"

    # headers
    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    APPLICATION_JSON = "application/json"

    # env
    ENV_API_KEY = "PLAUSIBLE_API_KEY"
    ENV_SITE_ID = "PLAUSIBLE_SITE_ID"
    ENV_BASE_URL = "PLAUSIBLE_BASE_URL"
    ENV_TIMEOUT = "PLAUSIBLE_TIMEOUT"

    # wire tokens
    LIST_SEPARATOR = ","
    ANY_OF_SEPARATOR = "|"
    PROPERTY_SEPARATOR = ":"
