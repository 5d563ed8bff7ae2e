"""
Moderation schemas.

ref: https://platform.openai.com/docs/api-reference/moderations
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from genai_client.validation import ValidationOutcome


class ModerationRequest(BaseModel):
    """POST moderations"""

    model_config = ConfigDict(frozen=True)

    input: Union[str, List[str]]
    model: Optional[str] = None

    def validate_request(self) -> ValidationOutcome:
        if isinstance(self.input, str):
            if not self.input.strip():
                return ValidationOutcome.invalid("input is required.", "input")
        elif not self.input or not any(item.strip() for item in self.input):
            return ValidationOutcome.invalid("input must contain at least one non-blank text.", "input")
        return ValidationOutcome.valid()


class ModerationResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    flagged: bool = False
    categories: Dict[str, bool] = Field(default_factory=dict)
    category_scores: Dict[str, float] = Field(default_factory=dict)


class ModerationResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    model: Optional[str] = None
    results: List[ModerationResult] = Field(default_factory=list)
