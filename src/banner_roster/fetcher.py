"""
Wiki page fetcher.

One GET per call against a fixed banner page, sent with the tool's own
User-Agent and an English-first Accept-Language. There is no retry: a failed
fetch is reported once and the caller decides what an empty result means.
"""

import logging
from collections.abc import Mapping

import httpx

from banner_roster.config import get_settings
from banner_roster.exceptions import FetchError

log = logging.getLogger(__name__)


def default_headers() -> dict[str, str]:
    settings = get_settings()
    return {
        "User-Agent": settings.user_agent,
        "Accept-Language": settings.accept_language,
    }


def fetch_html(url: str, headers: Mapping[str, str] | None = None) -> str:
    settings = get_settings()
    log.info("Fetching banner page %s", url)
    try:
        response = httpx.get(
            url,
            headers=dict(headers) if headers is not None else default_headers(),
            timeout=settings.fetch_timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Failed to fetch banner page '{url}': HTTP {e.response.status_code}",
            url=url,
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        raise FetchError(f"Network error fetching banner page '{url}': {e}", url=url) from e

    html = response.text
    log.debug("Banner page %s: %d chars", url, len(html))
    return html
