class AppMessage:
    EMPTY_GROUP = "filter group must contain at least one child"
    EMPTY_ANY_OF = "any-of value must contain at least one entry"
    ANY_OF_NOT_EQUALS = "any-of values are only allowed with the '==' operator"
    CUSTOM_PERIOD_REQUIRES_DATE = "period 'custom' requires a date range"
    DATE_REQUIRES_CUSTOM_PERIOD = "a date range is only allowed with period 'custom'"
    INVALID_DATE_RANGE = "date range start must not be after its end"
    MISSING_ENV = "missing required environment variable"
    INVALID_DSL = "invalid filter DSL"
    DSL_PARSE_ERROR = "filter DSL JSON parse error"
    UNEXPECTED_REALTIME_PAYLOAD = "unexpected realtime visitors payload"
    MISSING_RESULTS = "response does not contain results"
