"""
Chat-completion client used for field extraction.

Responsibilities:
- Send one extraction prompt to the LLM with fixed sampling parameters
- Return the raw response as a plain mapping
- Surface non-success statuses as CompletionAPIError (never retried)
"""

import logging
from typing import Any, Dict, Optional

from groq import APIConnectionError, APIStatusError, Groq

from surveybot.config import Settings
from surveybot.nlu.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class CompletionAPIError(Exception):
    """Raised when the completion call fails; carries the HTTP status if any."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CompletionClient:
    """
    Thin synchronous wrapper around the Groq chat-completions endpoint.

    Usage:
        client = CompletionClient(settings)
        response = client.complete(prompt)
    """

    def __init__(self, settings: Settings, client: Optional[Groq] = None):
        self.model = settings.GROQ_MODEL_NAME
        self.temperature = settings.LLM_TEMPERATURE
        self.max_tokens = settings.LLM_MAX_TOKENS
        self._client = client or Groq(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            timeout=settings.LLM_REQUEST_TIMEOUT,
            max_retries=0,
        )

    def build_messages(self, prompt: str) -> list:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def complete(self, prompt: str) -> Dict[str, Any]:
        """
        Blocking completion call.

        Raises:
            CompletionAPIError: on non-success status, timeout or connection failure.
        """
        logger.debug(
            "LLM call: model=%s max_tokens=%d temperature=%.2f",
            self.model,
            self.max_tokens,
            self.temperature,
        )

        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(prompt),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIStatusError as e:
            raise CompletionAPIError(f"API error: {e.status_code}", e.status_code) from e
        except APIConnectionError as e:
            raise CompletionAPIError(f"API connection error: {e}") from e

        return completion.model_dump()
