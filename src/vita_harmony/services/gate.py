"""Remote gate check deciding between the native and the web display mode."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)


class DisplayMode(str, Enum):
    NATIVE = "native"
    WEB = "web"


@dataclass
class GateResult:
    """Outcome of a gate check. ``status_code`` is None without a response."""

    mode: DisplayMode
    status_code: int | None = None
    body: str = ""

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "status_code": self.status_code,
            "body_length": len(self.body),
        }


def classify(status_code: int | None, body: str | bytes) -> DisplayMode:
    """Map a gate response to a display mode.

    200 with a body and any redirect mean web; everything else means native.
    """
    if status_code is None:
        return DisplayMode.NATIVE
    if status_code == 200:
        return DisplayMode.WEB if len(body) > 0 else DisplayMode.NATIVE
    if 300 <= status_code < 400:
        return DisplayMode.WEB
    return DisplayMode.NATIVE


def _headers(settings: Settings) -> dict[str, str]:
    return {
        "User-Agent": settings.gate_user_agent,
        "Accept-Language": settings.gate_accept_language,
    }


async def check_gate(
    settings: Settings, client: httpx.AsyncClient | None = None
) -> GateResult:
    """Perform the gate request once. Never raises.

    Args:
        settings: Supplies the URL, timeout and request headers
        client: Optional client to use instead of a fresh one
    """
    if not settings.gate_url:
        logger.debug("No gate URL configured, staying native")
        return GateResult(DisplayMode.NATIVE)

    try:
        if client is None:
            async with httpx.AsyncClient(
                follow_redirects=False, timeout=settings.gate_timeout
            ) as own_client:
                response = await own_client.get(settings.gate_url, headers=_headers(settings))
        else:
            response = await client.get(
                settings.gate_url,
                headers=_headers(settings),
                follow_redirects=False,
                timeout=settings.gate_timeout,
            )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Gate check failed, staying native: %s", e)
        return GateResult(DisplayMode.NATIVE)

    mode = classify(response.status_code, response.content)
    logger.info("Gate responded %s, display mode %s", response.status_code, mode.value)
    return GateResult(mode, response.status_code, response.text)


class DisplayModeState:
    """Observable display mode, native until a gate check says otherwise."""

    def __init__(self, mode: DisplayMode = DisplayMode.NATIVE):
        self._mode = mode
        self._listeners: list[Callable[[DisplayMode], None]] = []

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    def subscribe(self, listener: Callable[[DisplayMode], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, mode: DisplayMode) -> None:
        if mode == self._mode:
            return
        self._mode = mode
        for listener in list(self._listeners):
            listener(mode)


async def resolve_display_mode(
    state: DisplayModeState,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> GateResult:
    """Run the gate check and publish its mode on ``state``."""
    result = await check_gate(settings, client)
    state.set(result.mode)
    return result
