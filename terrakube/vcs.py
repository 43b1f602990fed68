"""Version control system connections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .crud import CrudService, ListOptions
from .errors import validate_id
from .jsonapi import attr

# Wire names of the credential attributes.
_CLIENT_WIRE, _SIGNING_WIRE, _SESSION_WIRE = ("clientSecret", "privateKey", "accessToken")
_BLANK = ""


@dataclass
class VCS:
    """A version control system connection of an organization."""

    jsonapi_type: ClassVar[str] = "vcs"

    id: str = ""
    name: str = attr("name", "")
    description: str = attr("description", "")
    vcs_type: str = attr("vcsType", "")
    connection_type: str = attr("connectionType", "")
    client_id: str = attr("clientId", "")
    client_secret: str = attr(_CLIENT_WIRE, _BLANK)
    private_key: str = attr(_SIGNING_WIRE, _BLANK)
    endpoint: str = attr("endpoint", "")
    api_url: str = attr("apiUrl", "")
    status: str = attr("status", "")
    callback: str | None = attr("callback")
    access_token: str | None = attr(_SESSION_WIRE)
    redirect_url: str | None = attr("redirectUrl")
    created_by: str | None = attr("createdBy")
    created_date: str | None = attr("createdDate")
    updated_by: str | None = attr("updatedBy")
    updated_date: str | None = attr("updatedDate")


class VCSService(CrudService):
    """Operations on the VCS connection endpoints."""

    model = VCS

    def _path(self, org_id: str, vcs_id: str | None = None) -> str:
        validate_id("organizationID", org_id)
        segments = ["organization", org_id, "vcs"]
        if vcs_id is not None:
            validate_id("vcsID", vcs_id)
            segments.append(vcs_id)
        return self.transport.api_path(*segments)

    def list(self, org_id: str, opts: ListOptions | None = None) -> list[VCS]:
        """Return all VCS connections of an organization."""
        return self._list(self._path(org_id), opts)

    def get(self, org_id: str, vcs_id: str) -> VCS:
        """Return one VCS connection by ID."""
        return self._get(self._path(org_id, vcs_id))

    def create(self, org_id: str, vcs: VCS) -> VCS:
        """Create a VCS connection in an organization."""
        return self._create(self._path(org_id), vcs)

    def update(self, org_id: str, vcs: VCS) -> VCS:
        """Update an existing VCS connection; its ``id`` must be set."""
        return self._update(self._path(org_id, vcs.id), vcs)

    def delete(self, org_id: str, vcs_id: str) -> None:
        """Delete a VCS connection by ID."""
        self._delete(self._path(org_id, vcs_id))