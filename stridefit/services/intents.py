"""
Hand-off URIs for the phone dialer and the maps app.

Launching is fire-and-forget: the app never learns whether the call or the
route happened, and a launcher failure is logged rather than raised.
"""

import logging
import re
from typing import Callable, Optional
from urllib.parse import quote

from stridefit.core.config import settings
from stridefit.data.community import get_trail

logger = logging.getLogger(__name__)

Launcher = Callable[[str], None]

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_dial_uri(phone: str) -> str:
    return "tel:" + re.sub(r"\D", "", phone)


def build_directions_uri(destination: str, locality: Optional[str] = None) -> str:
    locality = settings.STORE_LOCALITY if locality is None else locality
    query = f"{destination} {locality}".strip()
    return "maps://?daddr=" + quote(query, safe=_URI_COMPONENT_SAFE)


def _log_launcher(uri: str) -> None:
    logger.info(f"Opening {uri}")


class IntentService:
    def __init__(self, launcher: Optional[Launcher] = None):
        self.launcher = launcher or _log_launcher

    def _launch(self, uri: str) -> str:
        try:
            self.launcher(uri)
        except Exception as e:
            logger.error(f"Could not open {uri}: {e}")
        return uri

    def dial_store(self) -> str:
        return self._launch(build_dial_uri(settings.STORE_PHONE))

    def directions_to(self, destination: str) -> str:
        return self._launch(build_directions_uri(destination))

    def directions_to_trail(self, trail_id: str) -> Optional[str]:
        trail = get_trail(trail_id)
        if trail is None:
            logger.warning(f"Unknown trail {trail_id}")
            return None
        return self.directions_to(trail.name)
