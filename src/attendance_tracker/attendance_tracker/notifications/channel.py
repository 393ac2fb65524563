from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

from ..core.exceptions import ChannelUnavailableError

logger = logging.getLogger(__name__)


class MessageChannel(Protocol):
    def open(self, target_url: str) -> None:
        """Hand the deep link to the messaging app; raise ChannelUnavailableError if that fails."""

        raise NotImplementedError


class BrowserChannel(MessageChannel):
    """Open the deep link in a new browser tab on the operator's machine."""

    def open(self, target_url: str) -> None:
        try:
            opened = webbrowser.open(target_url, new=2)
        except webbrowser.Error as exc:
            raise ChannelUnavailableError("No browser available to open WhatsApp") from exc
        if not opened:
            raise ChannelUnavailableError("Popup blocked - please allow popups and try again")
