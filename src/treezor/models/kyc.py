"""KYC liveness check results. Keys are kebab-case on the wire."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from treezor.types import Integer


class KYCLivenessIdentity(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    last_name: str | None = Field(None, alias="last-name")
    first_name: str | None = Field(None, alias="first-name")
    birth_date: str | None = Field(None, alias="birth-date")


class KYCLiveness(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    started_at: datetime | None = Field(None, alias="started-at")
    updated_at: datetime | None = Field(None, alias="updated-at")
    identity: KYCLivenessIdentity | None = None
    kyc_status: str | None = Field(None, alias="kyc-status")
    comment: str | None = None
    user_id: str | None = None
    score: Integer | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
