"""Client for the OpenAI-compatible chat-completion gateway."""

import logging

import httpx

from ..config import Settings, get_settings
from ..errors import (
    EmptyReplyError,
    GatewayConfigError,
    GatewayError,
    QuotaExhaustedError,
    RateLimitedError,
)

logger = logging.getLogger(__name__)


class GatewayClient:
    """Sends chat-completion requests to the AI gateway.

    One request per call; failures are raised as typed errors and never
    retried.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    async def complete(self, messages: list[dict]) -> str:
        """Run a chat completion and return the single reply text.

        Args:
            messages: Chat messages to send

        Returns:
            The content of the first choice

        Raises:
            GatewayConfigError: if no API key is configured
            RateLimitedError: on HTTP 429
            QuotaExhaustedError: on HTTP 402
            EmptyReplyError: if the reply has no content
            GatewayError: on any other failure
        """
        if not self.settings.gateway_api_key:
            logger.error("AI gateway API key not configured")
            raise GatewayConfigError("API configuration error")

        payload = {"model": self.settings.model, "messages": messages}
        headers = {
            "Authorization": f"Bearer {self.settings.gateway_api_key}",
            "Content-Type": "application/json",
        }

        logger.info("Calling AI gateway (model=%s)", self.settings.model)
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.settings.gateway_timeout
            ) as client:
                response = await client.post(
                    self.settings.gateway_url, json=payload, headers=headers
                )
        except httpx.HTTPError as e:
            logger.error("AI gateway request failed: %s", e)
            raise GatewayError(f"Gateway request failed: {e}") from e

        if not response.is_success:
            body = response.text
            logger.error("AI gateway error: %s %s", response.status_code, body[:500])
            if response.status_code == 429:
                raise RateLimitedError("Rate limited", response.status_code, body)
            if response.status_code == 402:
                raise QuotaExhaustedError("Quota exhausted", response.status_code, body)
            raise GatewayError(
                f"Gateway returned {response.status_code}", response.status_code, body
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("AI gateway returned non-JSON body: %r", response.text[:200])
            raise GatewayError("Gateway returned an invalid body") from e

        logger.debug("AI response received: %s", data)

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None

        if not content:
            logger.error("No content in AI response")
            raise EmptyReplyError("No content in AI response", response.status_code)

        return content
