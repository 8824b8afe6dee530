"""
OpenRouter chat-completion client for itinerary generation.

The client renders the trip prompt, posts it to the provider's
chat-completions endpoint and extracts the generated text from the first
choice. One blocking HTTP call is made per itinerary; there is no retry.
"""

import time
from typing import Optional

import requests
from pydantic import ValidationError

from backend.schemas import TripRequest, ChatMessage, PromptPayload, CompletionResponse
from backend.utils.config import Settings
from backend.utils.exceptions import (
    CompletionProviderError,
    ConfigurationError,
    UpstreamResponseError,
)
from backend.utils.logger import get_logger
from .prompts import build_itinerary_prompt, strip_code_fences

logger = get_logger(__name__)

NO_ITINERARY_FOUND = "No itinerary found."


class OpenRouterClient:
    """
    Thin client for the OpenRouter chat-completions API.

    The API key is handed in by the caller; the client never reads it from
    the environment and never logs it.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "openai/gpt-3.5-turbo",
        referer: str = "http://localhost:3000",
        title: str = "Travel Planner",
        temperature: float = 0.7,
        timeout: Optional[float] = 60,
    ):
        """
        Args:
            api_key: Provider bearer token
            base_url: Provider API root, without the trailing endpoint
            model: Model identifier sent in every request
            referer: Value of the HTTP-Referer header
            title: Value of the X-Title header
            temperature: Sampling temperature
            timeout: Seconds to wait for the provider (None waits forever)
        """
        self._api_key = api_key
        self.base_url = base_url
        self.url = (base_url or "").rstrip("/") + "/chat/completions"
        self.model = model
        self.referer = referer
        self.title = title
        self.temperature = temperature
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenRouterClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.openrouter_api_key.get_secret_value(),
            base_url=settings.openrouter_base_url,
            model=settings.openrouter_model,
            referer=settings.openrouter_referer,
            title=settings.openrouter_title,
            temperature=settings.llm_temperature,
            timeout=settings.request_timeout,
        )

    def check_configuration(self) -> None:
        """Raise ConfigurationError if the client cannot address a provider model."""
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("Completion provider base URL is empty")
        if not self.model or not self.model.strip():
            raise ConfigurationError("Completion model identifier is empty")

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "HTTP-Referer": self.referer,
            "X-Title": self.title,
            "Content-Type": "application/json",
        }

    def build_payload(self, prompt: str) -> PromptPayload:
        return PromptPayload(
            model=self.model,
            messages=[ChatMessage(role="user", content=prompt)],
            temperature=self.temperature,
        )

    def generate_itinerary(self, request: TripRequest) -> str:
        """
        Ask the provider for an itinerary matching the trip request.

        Args:
            request: Parsed trip request

        Returns:
            Cleaned itinerary text, or NO_ITINERARY_FOUND when the reply has no choices

        Raises:
            CompletionProviderError: If the HTTP call cannot complete
            ConfigurationError: If base_url or model is blank
            UpstreamResponseError: If the reply body is not valid JSON
        """
        self.check_configuration()
        payload = self.build_payload(build_itinerary_prompt(request))

        logger.info(
            "itinerary_request",
            destination=request.destination,
            days=request.days,
            model=self.model,
        )
        started = time.monotonic()
        try:
            response = requests.post(
                self.url,
                headers=self._headers(),
                json=payload.model_dump(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(
                "completion_provider_unreachable",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise CompletionProviderError(
                f"Completion provider request failed: {e}",
                context={"url": self.url},
            ) from e

        latency_ms = int((time.monotonic() - started) * 1000)
        if not response.ok:
            # Error bodies carry no choices and end up as the fallback text
            logger.warning(
                "completion_provider_status",
                status_code=response.status_code,
                latency_ms=latency_ms,
            )

        try:
            parsed = CompletionResponse.model_validate_json(response.text)
        except ValidationError as e:
            logger.error(
                "completion_response_invalid",
                status_code=response.status_code,
                error=str(e),
            )
            raise UpstreamResponseError(
                f"Could not parse completion provider response: {e}",
                status_code=response.status_code,
            ) from e

        content = parsed.first_content()
        if content is None:
            logger.warning("itinerary_empty", status_code=response.status_code)
            return NO_ITINERARY_FOUND

        itinerary = strip_code_fences(content)
        logger.info("itinerary_generated", latency_ms=latency_ms, chars=len(itinerary))
        return itinerary
