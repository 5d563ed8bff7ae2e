"""
Audio translation schemas.

The request is sent as multipart/form-data, never as JSON, so it is a plain
dataclass holding the binary payload descriptor.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict

from genai_client.models.common import FileContent
from genai_client.validation import (
    ValidationOutcome,
    first_failure,
    require_choice,
    require_range,
    require_text,
)

RESPONSE_FORMATS = ("json", "text", "srt", "verbose_json", "vtt")
DEFAULT_TRANSLATION_MODEL = "whisper-1"


@dataclass
class TranslationRequest:
    """POST audio/translations (translates audio into English)."""

    audio_file: Optional[FileContent] = None
    model: str = DEFAULT_TRANSLATION_MODEL
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None

    def validate_request(self) -> ValidationOutcome:
        # audio_file preconditions belong to the multipart encoder
        return first_failure(
            lambda: require_text(self.model, "model"),
            lambda: require_choice(self.response_format, "response_format", RESPONSE_FORMATS),
            lambda: require_range(self.temperature, "temperature", 0.0, 1.0),
        )


class TranslationResponse(BaseModel):
    """
    Translated text.

    For text/srt/vtt response formats the body is not JSON; the executor
    fills `text` with the raw body instead.
    """

    model_config = ConfigDict(extra="allow")

    text: str = ""
