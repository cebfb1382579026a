"""Base classes for upstream resource shapes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TreezorModel(BaseModel):
    """Resource as the upstream sends it.

    Every field is optional: None means the key was absent, which the
    upstream treats differently from a present zero value. Unknown keys are
    ignored so new upstream fields do not break decoding.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict:
        """Dump with upstream key names and textual conventions, absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class SnakeCaseModel(TreezorModel):
    """Resource whose wire keys are already snake_case (SEPA, recall requests)."""

    model_config = ConfigDict(alias_generator=None)
