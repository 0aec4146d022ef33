from __future__ import annotations

import json
import logging

import requests

from ..cards.builder import Card
from ..errors import DeliveryError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class TeamsWebhookClient:
    """Posts rendered cards to a Microsoft Teams incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(self, card: Card) -> None:
        payload = card.to_payload()
        logger.debug("%s", json.dumps(payload, indent=2, ensure_ascii=False))

        try:
            response = self._session.post(
                self.webhook_url,
                data=json.dumps(payload).encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise DeliveryError(response.status_code, response.text)

        logger.info("Notification sent to Microsoft Teams successfully.")
