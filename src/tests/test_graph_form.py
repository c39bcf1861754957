"""Tests for the graph form submit workflow."""

import pytest

from src.app.graph_form import GraphForm
from src.data.stores.base import MemoryConfigStore
from src.models.graph_registry import GraphRegistry


class FailingStore(MemoryConfigStore):
    def save(self) -> bool:
        return False


@pytest.fixture
def store():
    return MemoryConfigStore({"web01": {"dashboard": "Hosts", "panelId": "1"}})


@pytest.fixture
def form(store):
    return GraphForm(GraphRegistry(store))


class TestSubmitLabel:
    """Test the submit button label."""

    def test_unbound_label(self, form):
        assert form.submit_label == "Add graph"

    def test_bound_label(self, form):
        form.bind("web01")
        assert form.submit_label == "Update graph"

    def test_explicit_label(self, store):
        form = GraphForm(GraphRegistry(store), submit_label="Save")
        form.bind("web01")
        assert form.submit_label == "Save"


class TestSubmit:
    """Test add and update through the form."""

    def test_submit_adds_when_unbound(self, form, store):
        """Test an unbound submit adds the graph."""
        outcome = form.submit({"name": "svc1", "dashboard": "Hosts", "panelId": "1"})

        assert outcome.success
        assert outcome.notification == "Graph saved"
        assert store.get_section("svc1") == {"dashboard": "Hosts", "panelId": "1"}

    def test_submit_add_existing(self, form, store):
        """Test adding a taken name reports the error."""
        outcome = form.submit({"name": "web01", "dashboard": "Net", "panelId": "2"})

        assert not outcome.success
        assert outcome.errors == ["Can't add graph 'web01'. Graph already exists"]
        assert store.get_section("web01") == {"dashboard": "Hosts", "panelId": "1"}

    def test_submit_updates_when_bound(self, form, store):
        """Test a bound submit updates the graph in place."""
        form.bind("web01")
        assert form.values == {"name": "web01", "dashboard": "Hosts", "panelId": "1"}

        outcome = form.submit({"name": "web01", "dashboard": "Net", "panelId": "2"})

        assert outcome.success
        assert outcome.notification == "Graph updated"
        assert store.get_section("web01") == {"dashboard": "Net", "panelId": "2"}

    def test_submit_renames_when_bound(self, form, store):
        """Test changing the name of a bound graph renames it."""
        form.bind("web01")

        outcome = form.submit({"name": "web02", "dashboard": "Hosts", "panelId": "1"})

        assert outcome.success
        assert store.sections() == ["web02"]

    def test_submit_unbinds(self, form):
        """Test the form is unbound after submit, even on failure."""
        form.bind("web01")
        form.submit({"name": "", "dashboard": "Hosts", "panelId": "1"})

        assert form.bound_graph is None
        assert form.values == {}
        assert form.submit_label == "Add graph"

    def test_submit_required_fields(self, form, store):
        """Test blank required fields are reported by label."""
        outcome = form.submit({"name": " ", "dashboard": "Hosts"})

        assert not outcome.success
        assert outcome.errors == ["Name of service is required", "PanelId is required"]
        assert store.sections() == ["web01"]

    def test_submit_save_failure(self):
        """Test a failing save reports failure and keeps the store unchanged."""
        store = FailingStore()
        form = GraphForm(GraphRegistry(store))

        outcome = form.submit({"name": "svc1", "dashboard": "Hosts", "panelId": "1"})

        assert not outcome.success
        assert outcome.notification is None
        assert outcome.errors == ["Can't save graphs. Changes have been discarded"]
        assert not store.has_section("svc1")


class TestRemove:
    """Test removing through the form."""

    def test_remove(self, form, store):
        outcome = form.remove("web01")

        assert outcome.success
        assert outcome.notification == "Graph removed"
        assert not store.has_section("web01")

    def test_remove_missing(self, form):
        outcome = form.remove("nope")

        assert not outcome.success
        assert outcome.errors == ["Can't remove graph 'nope'. Graph does not exist"]
