"""Gemini API key resolution: local setting first, then the key endpoint."""
import httpx

from content_toolkit.config import settings
from content_toolkit.services.errors import ConfigurationError
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

MISSING_KEY_MESSAGE = (
    "An API Key must be set. Add GEMINI_API_KEY to .env, "
    "or set KEY_ENDPOINT_URL to a service that returns {\"apiKey\": \"...\"}."
)


class CredentialProvider:
    """Resolve the API key once and keep it for the provider's lifetime."""

    def __init__(
        self,
        api_key: str | None = None,
        key_endpoint_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._key_endpoint_url = key_endpoint_url if key_endpoint_url is not None else settings.key_endpoint_url
        self._http_client = http_client
        self._resolved: str | None = None

    async def _fetch_from_endpoint(self) -> str:
        if not self._key_endpoint_url:
            return ""
        try:
            if self._http_client is not None:
                resp = await self._http_client.get(self._key_endpoint_url)
            else:
                async with httpx.AsyncClient(timeout=10.0) as client:
                    resp = await client.get(self._key_endpoint_url)
        except httpx.HTTPError as e:
            logger.warning("key_endpoint_unreachable", url=self._key_endpoint_url, error=str(e))
            return ""
        if resp.status_code != 200:
            logger.warning("key_endpoint_failed", url=self._key_endpoint_url, status=resp.status_code)
            return ""
        try:
            data = resp.json()
        except ValueError:
            logger.warning("key_endpoint_invalid_json", url=self._key_endpoint_url)
            return ""
        return (data.get("apiKey") or "") if isinstance(data, dict) else ""

    async def get_api_key(self) -> str:
        """Return the key or raise ConfigurationError."""
        if self._resolved:
            return self._resolved
        key = (self._api_key or "").strip() or (await self._fetch_from_endpoint()).strip()
        if not key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        self._resolved = key
        return key
