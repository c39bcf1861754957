"""Form workflow for adding and editing graphs."""

import logging
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel

from ..config.graph_fields import get_field_spec, list_field_names
from ..models.graph import GraphResult
from ..models.graph_registry import GraphRegistry

logger = logging.getLogger(__name__)


class SubmitOutcome(BaseModel):
    """Result of a form submission."""

    success: bool
    notification: Optional[str] = None
    errors: List[str] = []


class GraphForm:
    """Add/edit form for graphs with premade dashboards.

    The form is unbound (adding a graph) until ``bind()`` loads an existing
    graph; every submit or remove returns it to the unbound state.
    """

    def __init__(self, registry: GraphRegistry, submit_label: Optional[str] = None):
        self.registry = registry
        self._submit_label = submit_label
        self.values: Dict[str, str] = {}

    @property
    def bound_graph(self) -> Optional[str]:
        return self.registry.bound_name

    @property
    def submit_label(self) -> str:
        if self._submit_label is not None:
            return self._submit_label
        if self.bound_graph is None:
            return "Add graph"
        return "Update graph"

    def bind(self, name: str) -> GraphResult:
        """Load the graph called name into the form."""
        result = self.registry.bind(name)
        if result.ok:
            self.values = dict(result.values)
        return result

    def validate(self, form_data: Mapping[str, object]) -> List[str]:
        """Return an error for every required field left blank."""
        errors = []
        for field_name in list_field_names():
            spec = get_field_spec(field_name)
            value = form_data.get(field_name)
            if spec.required and (value is None or not str(value).strip()):
                errors.append(f"{spec.label} is required")
        return errors

    def submit(self, form_data: Mapping[str, object]) -> SubmitOutcome:
        """Add or update the graph described by form_data and save.

        Args:
            form_data: Submitted values for name, dashboard and panelId

        Returns:
            SubmitOutcome; on failure the staged change is not kept
        """
        try:
            errors = self.validate(form_data)
            if errors:
                return SubmitOutcome(success=False, errors=errors)

            name = str(form_data["name"]).strip()
            values = {
                "dashboard": form_data["dashboard"],
                "panelId": form_data["panelId"],
            }

            if self.bound_graph is None:
                notification = "Graph saved"
                result = self.registry.add(name, values)
            else:
                notification = "Graph updated"
                result = self.registry.update(name, values, self.bound_graph)

            return self._finish(result, notification)
        finally:
            self._reset()

    def remove(self, name: str) -> SubmitOutcome:
        """Remove the graph called name and save."""
        try:
            return self._finish(self.registry.remove(name), "Graph removed")
        finally:
            self._reset()

    def _finish(self, result: GraphResult, notification: str) -> SubmitOutcome:
        if not result.ok:
            logger.warning("Graph operation failed: %s", result.message)
            return SubmitOutcome(success=False, errors=[result.message])

        saved = self.registry.commit()
        if not saved.ok:
            return SubmitOutcome(success=False, errors=[saved.message])

        return SubmitOutcome(success=True, notification=notification)

    def _reset(self) -> None:
        self.registry.unbind()
        self.values = {}
