"""Response envelope contract.

Every upstream response wraps its items in ``{"<resource>": [...]}``, even
for operations that act on a single resource. Single-item operations must
get exactly one item back; anything else is an upstream contract violation
and is reported, never coerced.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, TypeVar

from pydantic import BaseModel, ValidationError

from treezor.errors.exceptions import EnvelopeCountError, EnvelopeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Envelope(Generic[T]):
    """Items decoded from one response, in upstream order."""

    resource_key: str
    items: list[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def single(self) -> T:
        """Return the only item, or raise EnvelopeCountError."""
        if len(self.items) != 1:
            logger.warning(
                "Envelope '%s' holds %d items where exactly one was expected",
                self.resource_key,
                len(self.items),
            )
            raise EnvelopeCountError(self.resource_key, len(self.items))
        return self.items[0]


def load_document(body: bytes | str | dict, resource_key: str) -> dict[str, Any]:
    """Parse a response body into its top-level JSON object."""
    if isinstance(body, dict):
        return body
    try:
        document = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EnvelopeError(resource_key, f"response body is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise EnvelopeError(
            resource_key,
            f"response body is a JSON {type(document).__name__}, expected an object",
        )
    return document


def decode_envelope(
    body: bytes | str | dict,
    resource_key: str,
    model: type[BaseModel] | None = None,
) -> Envelope:
    """Extract and optionally validate the items stored under ``resource_key``."""
    document = load_document(body, resource_key)
    if resource_key not in document:
        raise EnvelopeError(
            resource_key,
            f"response has no '{resource_key}' key",
            {"keys": sorted(document)},
        )
    raw_items = document[resource_key]
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise EnvelopeError(
            resource_key,
            f"'{resource_key}' holds a JSON {type(raw_items).__name__}, expected an array",
        )

    if model is None:
        return Envelope(resource_key, list(raw_items))

    items = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(model.model_validate(raw))
        except ValidationError as exc:
            raise EnvelopeError(
                resource_key,
                f"item {index} under '{resource_key}' is not a valid {model.__name__}: {exc}",
                exc.errors(include_url=False, include_context=False),
            ) from exc
    return Envelope(resource_key, items)


def decode_list(body: bytes | str | dict, resource_key: str, model: type[BaseModel] | None = None) -> list:
    """Decode a list response: zero or more items, no count constraint."""
    return decode_envelope(body, resource_key, model).items


def decode_single(body: bytes | str | dict, resource_key: str, model: type[BaseModel] | None = None):
    """Decode a single-resource response, enforcing exactly one item."""
    return decode_envelope(body, resource_key, model).single()
