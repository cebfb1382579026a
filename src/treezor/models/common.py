"""Upstream error bodies.

Two formats are in use: the legacy API answers
``{"errors": [{"errorCode", "errorMessage", "additionalInformation"}]}`` or
``{"error": "..."}``; the Connect API answers
``{"errors": [{"type", "code", "message", "docUrl"}]}``.
"""

from enum import IntEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ErrorCode(IntEnum):
    """Upstream error codes callers commonly branch on."""

    INSUFFICIENT_FUNDS = 15030
    CARD_WRONG_PIN = 32056
    CARD_LOST = 32095
    CARD_STOLEN = 32096
    CARD_BLOCKED = 32111


class APIErrorDetail(BaseModel):
    """One entry of an upstream error body, whichever format it came in."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    error_code: int | None = Field(None, validation_alias=AliasChoices("errorCode", "code"))
    message: str = Field("", validation_alias=AliasChoices("errorMessage", "message"))
    type: str | None = None
    doc_url: str | None = Field(None, validation_alias=AliasChoices("docUrl", "doc_url"))
    additional_information: Any = Field(None, validation_alias="additionalInformation")

    @field_validator("error_code", mode="before")
    @classmethod
    def _lenient_code(cls, value):
        # both formats have been seen sending the code as a string
        if isinstance(value, str):
            return int(value) if value.strip().lstrip("-").isdigit() else None
        return value

    @property
    def known_code(self) -> ErrorCode | None:
        try:
            return ErrorCode(self.error_code)
        except ValueError:
            return None

    def __str__(self) -> str:
        if self.error_code is not None:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ErrorResponse(BaseModel):
    """Upstream error body normalized to a list of details."""

    model_config = ConfigDict(extra="ignore")

    errors: list[APIErrorDetail] = []
    error: str | None = None

    def details(self) -> list[APIErrorDetail]:
        if self.errors:
            return list(self.errors)
        if self.error:
            return [APIErrorDetail(message=self.error)]
        return []
