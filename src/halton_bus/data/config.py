from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from halton_bus.data.cache import CACHE_TTL_SECONDS


class BusConfig(BaseSettings):
    """Configuration for the Halton Bus feed and status page.

    Only the HTTP timeout is settable; everything else is a fixed constant of
    the upstream site and is never read from the environment.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # RSS delay feed (English only)
    feed_url: ClassVar[str] = "https://geoquery.haltonbus.ca/rss/Transportation-en-CA.xml"
    # bytes before the XML declaration that are not valid feed syntax
    feed_preamble_length: ClassVar[int] = 3

    # general notice page
    status_url: ClassVar[str] = "https://geoquery.haltonbus.ca/Cancellations.aspx"
    notice_element_id: ClassVar[str] = "ctl00_CPHPageBody_GeneralNoticesMsg"
    school_list_element_id: ClassVar[str] = "ctl00_CPHPageBody_operatorSchoolFilter_schoolList"
    school_list_sentinel: ClassVar[str] = "--All--"

    cache_ttl_seconds: ClassVar[float] = CACHE_TTL_SECONDS

    http_timeout_seconds: float = Field(default=30.0, alias="HALTON_BUS_HTTP_TIMEOUT")


@lru_cache
def get_bus_config() -> BusConfig:
    """Get the Halton Bus configuration (cached singleton).

    Returns:
        BusConfig with the HTTP timeout from .env or the environment.
    """
    return BusConfig()
