"""Request URL assembly.

Parameter order is fixed: platform(s), then configType, then searchPackage,
regardless of the order the prompts were answered in.
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from core.config import AppSettings
from core.domain.models import ApiRequest, ConfigType, Platform, Selections

# Pre-encoded `platform[]`; the key itself never goes through the encoder.
PLATFORM_KEY = "platform%5B%5D"
CONFIG_TYPE_KEY = "configType"
SEARCH_PACKAGE_KEY = "searchPackage"
ACCEPT_ALL = "*/*"


def encode_value(value: str) -> str:
    """Percent-encode a query value, keeping only RFC 3986 unreserved characters."""

    return quote(value, safe="")


def build_query_params(
    platforms: Iterable[Platform],
    config_type: ConfigType | None = None,
    search_package: str | None = None,
) -> list[str]:
    params = [f"{PLATFORM_KEY}={encode_value(p.value)}" for p in Platform.canonical(platforms)]
    if config_type is not None:
        params.append(f"{CONFIG_TYPE_KEY}={encode_value(config_type.value)}")
    if search_package:
        params.append(f"{SEARCH_PACKAGE_KEY}={encode_value(search_package)}")
    return params


def build_url(
    base_url: str,
    platforms: Iterable[Platform],
    config_type: ConfigType | None = None,
    search_package: str | None = None,
) -> str:
    """Append the encoded query to `base_url`; unchanged when there is nothing to add."""

    params = build_query_params(platforms, config_type, search_package)
    if not params:
        return base_url
    return f"{base_url}?{'&'.join(params)}"


def build_request(settings: AppSettings, selections: Selections) -> ApiRequest:
    url = build_url(
        settings.url,
        selections.platforms,
        selections.config_type,
        selections.search_package,
    )
    headers = {
        "Authorization": selections.auth_token,
        "Accept": ACCEPT_ALL,
        "Host": settings.host,
    }
    return ApiRequest(method="GET", url=url, headers=headers)
