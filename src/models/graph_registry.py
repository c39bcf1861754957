"""CRUD over graph sections of a configuration store."""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..data.stores.base import ConfigStore, StoreError
from .graph import GraphResult, GraphSection, GraphStatus, describe_validation_error

logger = logging.getLogger(__name__)


class GraphRegistry:
    """Adds, loads, updates and removes graph sections.

    Every operation returns a GraphResult instead of raising. Mutations are
    staged on the store and journaled; ``commit()`` persists them and undoes
    the journal if the store cannot save.
    """

    def __init__(self, store: ConfigStore):
        self.store = store
        self.bound_name: Optional[str] = None
        # (section name, values before the change or None if it was absent)
        self._journal: List[Tuple[str, Optional[Dict[str, str]]]] = []

    # --- Operations ---------------------------------------------------

    def add(self, name: str, values: Mapping[str, object]) -> GraphResult:
        """Add a graph.

        Args:
            name: Service name, unique across the store
            values: Mapping with "dashboard" and "panelId"

        Returns:
            GraphResult with status ALREADY_EXISTS if the graph exists,
            INVALID if a field is blank, OK otherwise
        """
        name = _normalize(name)
        if self.store.has_section(name):
            return GraphResult(
                status=GraphStatus.ALREADY_EXISTS,
                name=name,
                message=f"Can't add graph '{name}'. Graph already exists",
            )

        graph, error = self._validate(name, values)
        if error:
            return error

        try:
            self._stage_set(name, graph.to_values())
        except StoreError as e:
            return GraphResult(
                status=GraphStatus.INVALID,
                name=name,
                message=f"Can't add graph '{name}'. {e}",
            )
        logger.info("Added graph '%s'", name)
        return GraphResult(name=name, values=graph.to_values())

    def bind(self, name: str) -> GraphResult:
        """Load a graph for editing and remember its name.

        Returns:
            GraphResult whose values hold name, dashboard and panelId,
            or status NOT_FOUND
        """
        name = _normalize(name)
        if not self.store.has_section(name):
            return GraphResult(
                status=GraphStatus.NOT_FOUND,
                name=name,
                message=f"Can't load graph '{name}'. Graph does not exist",
            )

        self.bound_name = name
        values = self.store.get_section(name)
        values["name"] = name
        return GraphResult(name=name, values=values)

    def unbind(self) -> None:
        self.bound_name = None

    def update(self, name: str, values: Mapping[str, object], old_name: str) -> GraphResult:
        """Update a graph, renaming it when name differs from old_name.

        Args:
            name: The possibly new name of the graph
            values: Mapping with "dashboard" and "panelId"
            old_name: The name of the graph to update

        Returns:
            GraphResult with status NOT_FOUND, ALREADY_EXISTS (rename onto an
            existing graph), INVALID or OK
        """
        name, old_name = _normalize(name), _normalize(old_name)
        if not self.store.has_section(old_name):
            return GraphResult(
                status=GraphStatus.NOT_FOUND,
                name=old_name,
                message=f"Can't update graph '{old_name}'. Graph does not exist",
            )

        if name != old_name:
            # Rename: checked up front so a taken name leaves old_name in place
            if self.store.has_section(name):
                return GraphResult(
                    status=GraphStatus.ALREADY_EXISTS,
                    name=name,
                    message=f"Can't add graph '{name}'. Graph already exists",
                )
            _, error = self._validate(name, values)
            if error:
                return error

            self.remove(old_name)
            result = self.add(name, values)
            if not result.ok:
                self._undo(1)
                return result
            logger.info("Renamed graph '%s' to '%s'", old_name, name)
            return result

        graph, error = self._validate(name, values)
        if error:
            return error

        self._stage_set(name, graph.to_values())
        logger.info("Updated graph '%s'", name)
        return GraphResult(name=name, values=graph.to_values())

    def remove(self, name: str) -> GraphResult:
        """Remove a graph.

        Returns:
            GraphResult with status NOT_FOUND or OK
        """
        name = _normalize(name)
        if not self.store.has_section(name):
            return GraphResult(
                status=GraphStatus.NOT_FOUND,
                name=name,
                message=f"Can't remove graph '{name}'. Graph does not exist",
            )

        self._journal.append((name, self.store.get_section(name)))
        self.store.remove_section(name)
        logger.info("Removed graph '%s'", name)
        return GraphResult(name=name)

    def commit(self) -> GraphResult:
        """Persist staged changes; undo them if the store fails to save."""
        if self.store.save():
            self._journal.clear()
            return GraphResult()

        staged = len(self._journal)
        self.rollback()
        logger.error("Saving graphs failed; discarded %d staged change(s)", staged)
        return GraphResult(
            status=GraphStatus.PERSISTENCE_FAILURE,
            message="Can't save graphs. Changes have been discarded",
        )

    def rollback(self) -> None:
        """Undo every change staged since the last commit."""
        self._undo(len(self._journal))

    # --- Accessors ----------------------------------------------------

    def get(self, name: str) -> Optional[GraphSection]:
        name = _normalize(name)
        if not self.store.has_section(name):
            return None
        return GraphSection.from_section(name, self.store.get_section(name))

    def list_graphs(self) -> List[GraphSection]:
        graphs = []
        for name in self.store.sections():
            try:
                graphs.append(GraphSection.from_section(name, self.store.get_section(name)))
            except ValidationError as e:
                logger.warning("Skipping incomplete graph '%s': %s", name, describe_validation_error(e))
        return graphs

    @property
    def pending_changes(self) -> int:
        return len(self._journal)

    # --- Helpers ------------------------------------------------------

    def _validate(
        self, name: str, values: Mapping[str, object]
    ) -> Tuple[Optional[GraphSection], Optional[GraphResult]]:
        try:
            return GraphSection.from_section(name, values), None
        except ValidationError as e:
            return None, GraphResult(
                status=GraphStatus.INVALID,
                name=name,
                message=f"Invalid graph '{name}': {describe_validation_error(e)}",
            )

    def _stage_set(self, name: str, values: Dict[str, str]) -> None:
        previous = self.store.get_section(name) if self.store.has_section(name) else None
        self.store.set_section(name, values)
        self._journal.append((name, previous))

    def _undo(self, count: int) -> None:
        for _ in range(count):
            name, previous = self._journal.pop()
            if previous is None:
                if self.store.has_section(name):
                    self.store.remove_section(name)
            else:
                self.store.set_section(name, previous)


def _normalize(name):
    # Section keys are stored trimmed so " svc " and "svc" are the same graph
    return name.strip() if isinstance(name, str) else name
