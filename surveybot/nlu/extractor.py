import logging
from typing import Optional

from surveybot.config import Settings
from surveybot.nlu.completion import CompletionAPIError, CompletionClient
from surveybot.nlu.parser import parse_ai_response
from surveybot.nlu.prompts import build_prompt
from surveybot.nlu.schemas import FieldRecord
from surveybot.nlu.validators import sanitize_input

logger = logging.getLogger(__name__)


class FieldExtractor:
    """
    Runs the whole extraction pipeline for one message:
    sanitize -> prompt -> completion -> parse -> validate.

    Shared by the polling bot and the one-shot CLI.
    """

    def __init__(self, completion_client: CompletionClient):
        self.completion_client = completion_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "FieldExtractor":
        return cls(CompletionClient(settings))

    def extract(self, message: str) -> Optional[FieldRecord]:
        """
        Extract booking fields from a raw message.

        Returns None on any failure; the cause is only logged.
        """
        logger.info("[EXTRACT_FIELDS] Called with message: %s", message)

        prompt = build_prompt(sanitize_input(message))

        try:
            response = self.completion_client.complete(prompt)
        except CompletionAPIError as e:
            logger.error("[EXTRACT_FIELDS] Completion failed (status=%s): %s", e.status_code, e)
            return None
        except Exception:
            logger.exception("[EXTRACT_FIELDS] Unexpected completion error")
            return None

        try:
            record = parse_ai_response(response)
        except Exception:
            logger.exception("[EXTRACT_FIELDS] Failed to parse completion response")
            return None

        logger.info("[EXTRACT_FIELDS] Result: %s", record)
        return record
