"""HTTP transport and the generic CRUD service used by resource services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import requests

from .errors import APIError
from .jsonapi import marshal_payload, unmarshal_many_payload, unmarshal_payload

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
_API_PREFIX = ("api", "v1")


@dataclass
class ListOptions:
    """Options for list requests; ``filter`` is an RSQL filter expression."""

    filter: str = ""


def _error_message(response: requests.Response) -> str:
    try:
        document = response.json()
    except ValueError:
        document = None
    if isinstance(document, dict) and isinstance(document.get("errors"), list):
        parts = [
            str(err.get("detail") or err.get("title"))
            for err in document["errors"]
            if isinstance(err, dict) and (err.get("detail") or err.get("title"))
        ]
        if parts:
            return "; ".join(parts)
    text = response.text.strip()
    return text or response.reason or f"HTTP {response.status_code}"


class Transport:
    """Sends authenticated JSON:API requests to a Terrakube endpoint."""

    def __init__(self, endpoint: str, token: str, session: requests.Session | None = None) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.token = token
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def api_path(self, *args: str) -> str:
        """Build an API path from segments, escaping each one."""
        return "/" + "/".join(quote(str(part), safe="") for part in (*_API_PREFIX, *args))

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        payload: bytes | None = None,
    ) -> bytes:
        """Send a request and return the body; raise APIError on error status."""
        headers = {"Accept": JSONAPI_MEDIA_TYPE}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if payload is not None:
            headers["Content-Type"] = JSONAPI_MEDIA_TYPE
        response = self.session.request(
            method, self.endpoint + path, params=params, data=payload, headers=headers
        )
        if response.status_code >= 400:
            raise APIError(response.status_code, _error_message(response), response.content)
        return response.content

    def close(self) -> None:
        """Close the underlying session if this transport created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class CrudService:
    """Common list/get/create/update/delete operations for one model type."""

    model: Any = None

    def __init__(self, transport: Transport, model: Any = None) -> None:
        self.transport = transport
        self.model = model if model is not None else type(self).model
        if self.model is None:
            raise TypeError("a model class is required")

    def _list(self, path: str, opts: ListOptions | None = None) -> list[Any]:
        params = None
        if opts is not None and opts.filter:
            params = {f"filter[{self.model.jsonapi_type}]": opts.filter}
        body = self.transport.request("GET", path, params=params)
        return unmarshal_many_payload(self.model, body)

    def _get(self, path: str) -> Any:
        return unmarshal_payload(self.model, self.transport.request("GET", path))

    def _create(self, path: str, resource: Any) -> Any:
        body = self.transport.request("POST", path, payload=marshal_payload(resource))
        return unmarshal_payload(self.model, body)

    def _update(self, path: str, resource: Any) -> Any:
        body = self.transport.request("PATCH", path, payload=marshal_payload(resource))
        return unmarshal_payload(self.model, body)

    def _delete(self, path: str) -> None:
        self.transport.request("DELETE", path)