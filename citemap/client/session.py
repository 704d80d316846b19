from __future__ import annotations

import logging
from typing import Optional

from citemap.client.api import GatewayClient, GatewayError
from citemap.client.debounce import Debouncer

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 1.0
LOADING_TEXT = "Analyzing text..."
REMEDIATION_HINTS = (
    "Please check that:",
    "1. The backend server is running",
    "2. Your Gemini API key is correctly set in the .env file",
)


class AnalysisSession:
    """
    View model behind the two-pane UI.

    The four fields vary independently; callers read them after awaiting
    settle() or after any set_input() to render the output pane. Every
    submission gets a generation number and a response is only applied if
    no newer submission has started since.
    """

    def __init__(self, gateway: GatewayClient, delay: float = DEBOUNCE_SECONDS):
        self.gateway = gateway
        self.input_text = ""
        self.analysis = ""
        self.is_loading = False
        self.error: Optional[str] = None
        self._generation = 0
        self._debouncer = Debouncer(delay, self.analyze)

    def set_input(self, text: str) -> None:
        self.input_text = text
        self._debouncer.trigger(text)

    async def settle(self) -> None:
        await self._debouncer.wait()

    async def analyze(self, text: str) -> None:
        self._generation += 1
        generation = self._generation

        if not text.strip():
            self.analysis = ""
            self.error = None
            self.is_loading = False
            return

        self.is_loading = True
        self.error = None
        try:
            analysis = await self.gateway.analyze(text)
        except GatewayError as e:
            if generation == self._generation:
                self.error = str(e)
            logger.error("Analysis error: %s", e)
        else:
            if generation == self._generation:
                self.analysis = analysis
            else:
                logger.debug("Dropped stale analysis for generation %d", generation)
        finally:
            if generation == self._generation:
                self.is_loading = False

    def render(self) -> str:
        if self.is_loading:
            return LOADING_TEXT
        if self.error:
            return "\n".join((f"Error: {self.error}", "", *REMEDIATION_HINTS))
        return self.analysis
