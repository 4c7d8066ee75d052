"""Best-effort reachability probe for generated links, routed through a CORS relay.

A ``False`` result is not proof that a link is dead: the relay itself may fail,
time out or be blocked by the target site. Callers only use ``True`` to promote
a link to "verified".
"""
import asyncio
import re
from urllib.parse import quote

import httpx

from content_toolkit.config import settings
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

URL_PATTERN = re.compile(r"https?://[^\s)]+")


def extract_first_url(line: str) -> str | None:
    """Return the first http(s) URL embedded in ``line``."""
    match = URL_PATTERN.search(line or "")
    return match.group(0) if match else None


def probe_url(url: str, proxy: str | None = None) -> str:
    """Relay URL for ``url``: the target goes URL-encoded into the query string."""
    return f"{proxy if proxy is not None else settings.link_probe_proxy}{quote(url, safe='')}"


async def _fetch(target: str, client: httpx.AsyncClient | None, timeout: float) -> httpx.Response:
    if client is not None:
        return await client.get(target, timeout=timeout)
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as session:
        return await session.get(target)


async def verify_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    proxy: str | None = None,
    timeout: float | None = None,
) -> bool:
    """
    GET the URL through the relay; True only for a 2xx answer within the timeout. Never retries.
    ``timeout`` bounds the whole probe (connect, headers and body together).
    """
    if not url or not url.startswith("http"):
        return False
    timeout = timeout if timeout is not None else settings.link_probe_timeout
    try:
        resp = await asyncio.wait_for(_fetch(probe_url(url, proxy), client, timeout), timeout)
    except asyncio.TimeoutError:
        logger.info("link_probe_timed_out", url=url, timeout=timeout)
        return False
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.info("link_probe_failed", url=url[:200], error=str(e) or type(e).__name__)
        return False
    ok = resp.is_success
    if not ok:
        logger.info("link_probe_rejected", url=url, status=resp.status_code)
    return ok
