from enum import Enum

from plausible_stats.constants.app_constants import AppConstants


class StatsProperty(str, Enum):
    EVENT_GOAL = "event:goal"
    EVENT_PAGE = "event:page"
    EVENT_HOSTNAME = "event:hostname"

    VISIT_ENTRY_PAGE = "visit:entry_page"
    VISIT_EXIT_PAGE = "visit:exit_page"
    VISIT_SOURCE = "visit:source"
    VISIT_REFERRER = "visit:referrer"
    VISIT_UTM_MEDIUM = "visit:utm_medium"
    VISIT_UTM_SOURCE = "visit:utm_source"
    VISIT_UTM_CAMPAIGN = "visit:utm_campaign"
    VISIT_UTM_CONTENT = "visit:utm_content"
    VISIT_UTM_TERM = "visit:utm_term"
    VISIT_DEVICE = "visit:device"
    VISIT_BROWSER = "visit:browser"
    VISIT_BROWSER_VERSION = "visit:browser_version"
    VISIT_OS = "visit:os"
    VISIT_OS_VERSION = "visit:os_version"
    VISIT_COUNTRY = "visit:country"
    VISIT_REGION = "visit:region"
    VISIT_CITY = "visit:city"

    @property
    def key(self) -> str:
        """
        Name of the breakdown column, e.g. "page" for event:page.
        """
        return self.value.split(AppConstants.PROPERTY_SEPARATOR, 1)[1]
