"""Thin HTTP client consuming the envelope contract.

Authentication is left to the caller: pass an ``httpx.Client`` already
carrying the bearer token (or an ``httpx.Auth``) and this class only adds
response checking and envelope decoding on top.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from treezor.config import TreezorSettings, settings as default_settings
from treezor.envelope import decode_list, decode_single
from treezor.errors.exceptions import TreezorAPIError
from treezor.models.common import APIErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def parse_error_body(response: httpx.Response) -> list[APIErrorDetail]:
    """Extract error details from either upstream error format; [] when unparseable."""
    try:
        return ErrorResponse.model_validate_json(response.content).details()
    except (ValidationError, ValueError):
        return []


def check_response(response: httpx.Response) -> httpx.Response:
    """Raise TreezorAPIError unless the response status is 2xx or 3xx."""
    if 200 <= response.status_code < 400:
        return response
    errors = parse_error_body(response)
    request = response.request
    logger.warning(
        "Treezor API returned HTTP %s for %s %s",
        response.status_code,
        request.method,
        request.url.path,
    )
    raise TreezorAPIError(
        response.status_code,
        request.method,
        str(request.url),
        errors,
        body="" if errors else response.text,
    )


class TreezorClient:
    """Sync client for single-resource and list operations."""

    def __init__(
        self,
        http: httpx.Client | None = None,
        config: TreezorSettings | None = None,
    ) -> None:
        self.config = config or default_settings
        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=self.config.effective_base_url,
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> TreezorClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict | None = None,
    ) -> httpx.Response:
        """Issue a request and check its status. Transport errors propagate."""
        body = None
        if isinstance(json, BaseModel):
            body = json.model_dump(mode="json", by_alias=True, exclude_none=True)
        elif json is not None:
            body = json
        response = self.http.request(method, path, json=body, params=params)
        return check_response(response)

    # ------------------------------------------------------------------
    # Envelope operations
    # ------------------------------------------------------------------

    def get_one(self, path: str, resource_key: str, model: type[BaseModel] | None = None, params: dict | None = None) -> Any:
        response = self.request("GET", path, params=params)
        return decode_single(response.content, resource_key, model)

    def get_many(self, path: str, resource_key: str, model: type[BaseModel] | None = None, params: dict | None = None) -> list:
        response = self.request("GET", path, params=params)
        return decode_list(response.content, resource_key, model)

    def create_one(self, path: str, resource_key: str, body: Any, model: type[BaseModel] | None = None) -> Any:
        response = self.request("POST", path, json=body)
        return decode_single(response.content, resource_key, model)

    def edit_one(self, path: str, resource_key: str, body: Any, model: type[BaseModel] | None = None) -> Any:
        response = self.request("PUT", path, json=body)
        return decode_single(response.content, resource_key, model)

    def cancel_one(self, path: str, resource_key: str, model: type[BaseModel] | None = None, params: dict | None = None) -> Any:
        response = self.request("DELETE", path, params=params)
        return decode_single(response.content, resource_key, model)
