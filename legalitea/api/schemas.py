import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str | None = None
    document_type: str | None = Field(default=None, alias="documentType")
    language: str | None = "en"


class SaveRequest(BaseModel):
    email: str | None = None
    analysis: dict[str, Any] | None = None
