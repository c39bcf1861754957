"""Graph section record, operation results and error kinds."""

from enum import Enum
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class GraphStatus(Enum):
    """Outcome of a registry operation."""
    OK = "OK"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


class GraphError(RuntimeError):
    """Base error for graph operations."""

    status = GraphStatus.OK

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class AlreadyExistsError(GraphError):
    """A graph with this name already exists."""
    status = GraphStatus.ALREADY_EXISTS


class NotFoundError(GraphError):
    """No graph with this name exists."""
    status = GraphStatus.NOT_FOUND


class InvalidGraphError(GraphError):
    """A required graph field is missing or blank."""
    status = GraphStatus.INVALID


class PersistenceError(GraphError):
    """The store could not persist staged changes."""
    status = GraphStatus.PERSISTENCE_FAILURE


_ERRORS = {
    GraphStatus.ALREADY_EXISTS: AlreadyExistsError,
    GraphStatus.NOT_FOUND: NotFoundError,
    GraphStatus.INVALID: InvalidGraphError,
    GraphStatus.PERSISTENCE_FAILURE: PersistenceError,
}


class GraphSection(BaseModel):
    """A service name mapped to a dashboard and a panel within it."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    dashboard: str
    panel_id: str = Field(alias="panelId")

    @field_validator("name", "dashboard", "panel_id", mode="before")
    @classmethod
    def _require_value(cls, value):
        # Panel ids may come in as integers; sections store strings
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or not value.strip():
            raise ValueError("is required")
        return value.strip()

    @classmethod
    def from_section(cls, name: str, values: Mapping[str, object]) -> "GraphSection":
        """Build a record from a section name and its stored values."""
        return cls(name=name, dashboard=values.get("dashboard"), panelId=values.get("panelId"))

    def to_values(self) -> Dict[str, str]:
        """Values as stored in the section (without the name)."""
        return {"dashboard": self.dashboard, "panelId": self.panel_id}


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a GraphSection validation error into one line.

    Args:
        error: Pydantic validation error

    Returns:
        Message such as "dashboard is required, panelId is required"
    """
    parts = []
    for item in error.errors():
        field = item["loc"][0] if item["loc"] else "graph"
        if field == "panel_id":
            field = "panelId"
        # Drop pydantic's "Value error, " prefix from custom validators
        msg = item["msg"].removeprefix("Value error, ")
        if item["type"] == "missing":
            msg = "is required"
        parts.append(f"{field} {msg}")
    return ", ".join(parts)


class GraphResult(BaseModel):
    """Registry operation result."""

    status: GraphStatus = GraphStatus.OK
    name: Optional[str] = None
    message: Optional[str] = None
    values: Optional[Dict[str, str]] = None

    @property
    def ok(self) -> bool:
        return self.status == GraphStatus.OK

    def raise_for_status(self) -> "GraphResult":
        """Raise the typed error for a failed result, return self otherwise.

        Raises:
            GraphError: Subclass matching the result status
        """
        if self.ok:
            return self
        raise _ERRORS[self.status](self.message or self.status.value, self.name)
