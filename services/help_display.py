from __future__ import annotations

import logging
import webbrowser
from typing import Callable, Optional

from config.settings import get_settings


logger = logging.getLogger(__name__)


def failure_message(url: str) -> str:
    return (
        "Failed to open help page. "
        f"Please open LinkMeIn's user guide in your browser at {url}"
    )


class HelpDisplay:
    """Opens the user guide in the system browser."""

    def __init__(self, url: Optional[str] = None, opener: Optional[Callable[[str], bool]] = None):
        self.url = url or get_settings().user_guide_url
        self.opener = opener or webbrowser.open

    def show(self) -> Optional[str]:
        """Open the guide; returns the fallback message if that fails, else None."""
        logger.debug("Showing help page about the application.")
        try:
            opened = self.opener(self.url)
        except (webbrowser.Error, OSError) as exc:
            logger.warning("Could not open user guide", extra={"error": str(exc)})
            return failure_message(self.url)
        if not opened:
            logger.warning("No browser available for user guide")
            return failure_message(self.url)
        return None
