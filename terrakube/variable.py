"""Workspace variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .crud import CrudService, ListOptions
from .errors import validate_id
from .jsonapi import attr

_ID_LABELS = ("organization ID", "workspace ID", "variable ID")


@dataclass
class Variable:
    """A Terrakube workspace variable."""

    jsonapi_type: ClassVar[str] = "variable"

    id: str = ""
    key: str = attr("key", "")
    value: str = attr("value", "")
    description: str = attr("description", "")
    category: str = attr("category", "")
    sensitive: bool = attr("sensitive", False)
    hcl: bool = attr("hcl", False)
    created_by: str | None = attr("createdBy")
    created_date: str | None = attr("createdDate")
    updated_by: str | None = attr("updatedBy")
    updated_date: str | None = attr("updatedDate")


class VariableService(CrudService):
    """Operations on the workspace variable endpoints."""

    model = Variable

    def _path(self, org_id: str, workspace_id: str, *item: str) -> str:
        for label, value in zip(_ID_LABELS, (org_id, workspace_id, *item)):
            validate_id(label, value)
        return self.transport.api_path(
            "organization", org_id, "workspace", workspace_id, "variable", *item
        )

    def list(self, org_id: str, workspace_id: str, opts: ListOptions | None = None) -> list[Variable]:
        """Return all variables of a workspace."""
        return self._list(self._path(org_id, workspace_id), opts)

    def get(self, org_id: str, workspace_id: str, variable_id: str) -> Variable:
        """Return one variable by ID."""
        return self._get(self._path(org_id, workspace_id, variable_id))

    def create(self, org_id: str, workspace_id: str, variable: Variable) -> Variable:
        """Create a variable in the workspace."""
        return self._create(self._path(org_id, workspace_id), variable)

    def update(self, org_id: str, workspace_id: str, variable: Variable) -> Variable:
        """Update an existing variable; its ``id`` must be set."""
        return self._update(self._path(org_id, workspace_id, variable.id), variable)

    def delete(self, org_id: str, workspace_id: str, variable_id: str) -> None:
        """Delete a variable by ID."""
        self._delete(self._path(org_id, workspace_id, variable_id))