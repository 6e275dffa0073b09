import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from apixu_weather.errors import ErrorKind, MalformedResponse, TransportError, classify, error_for
from apixu_weather.models import Weather
from apixu_weather.services.translator import translate

logger = logging.getLogger(__name__)

BASE_URL = "http://api.apixu.com/v1/current.json"


def build_url(base_url: str, api_key: str, location: str) -> str:
    """Return the current.json URL for a key and location, key first."""
    return f"{base_url}?{urlencode([('key', api_key), ('q', location)])}"


@dataclass(frozen=True)
class ApixuProvider:
    """Current conditions from Apixu for a single location.

    Values are immutable; ``query`` returns a copy bound to another location.
    """

    api_key: str = field(repr=False)
    location: str = ""
    base_url: str = BASE_URL
    timeout_seconds: Optional[float] = None

    def query(self, location: str) -> "ApixuProvider":
        return dataclasses.replace(self, location=location)

    @property
    def url(self) -> str:
        return build_url(self.base_url, self.api_key, self.location)

    async def get_weather(self, client: Optional[httpx.AsyncClient] = None) -> Weather:
        logger.debug("Fetching Apixu weather for %r", self.location)
        try:
            if client is not None:
                r = await client.get(self.url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as owned:
                    r = await owned.get(self.url)
        except httpx.RequestError as exc:
            logger.warning("Apixu request for %r failed: %s", self.location, exc)
            raise TransportError(str(exc) or None) from exc

        body = _json_or_none(r)
        envelope = body.get("error") if isinstance(body, dict) else None
        error_code = envelope.get("code") if isinstance(envelope, dict) else None
        kind = classify(r.status_code, error_code, has_error=envelope is not None)
        if kind is not ErrorKind.SUCCESS:
            message = envelope.get("message") if isinstance(envelope, dict) else None
            logger.warning("Apixu returned %s (%s) for %r: %s", r.status_code, kind.value, self.location, message)
            raise error_for(kind, message if isinstance(message, str) else None)

        if body is None:
            raise MalformedResponse("response body is not valid JSON")
        return translate(body)


def new(api_key: str) -> ApixuProvider:
    return ApixuProvider(api_key=api_key)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
