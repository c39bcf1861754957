"""Field registry for the graph form."""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class FieldSpec:
    """Specification for a graph form field."""

    name: str
    label: str
    description: str
    placeholder: Optional[str] = None
    required: bool = True


# Fields rendered by the graph form, in display order
GRAPH_FIELDS: Dict[str, FieldSpec] = {
    "name": FieldSpec(
        name="name",
        label="Name of service",
        description="The name of the service which should use a premade dashboard",
    ),
    "dashboard": FieldSpec(
        name="dashboard",
        label="Dashboard name",
        description="Name of the Grafana dashboard that will be used.",
        placeholder="DashboardName",
    ),
    "panelId": FieldSpec(
        name="panelId",
        label="PanelId",
        description="The panelId of the graph that will be used",
        placeholder="1",
    ),
}


def get_field_spec(name: str) -> Optional[FieldSpec]:
    """Get field specification by name.

    Args:
        name: Field name (e.g., "dashboard")

    Returns:
        FieldSpec if found, None otherwise
    """
    return GRAPH_FIELDS.get(name)


def list_field_names() -> List[str]:
    """List form field names in display order.

    Returns:
        List of field names
    """
    return list(GRAPH_FIELDS.keys())
