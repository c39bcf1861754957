"""Streamlit admin page for Grafana graphs with premade dashboards."""

import streamlit as st

from src.app.graph_form import GraphForm
from src.config.graph_fields import GRAPH_FIELDS
from src.config.settings import configure_logging, settings
from src.data.stores.factory import open_store
from src.models.graph_registry import GraphRegistry


def build_form() -> GraphForm:
    """Open the configured store and bind the graph being edited, if any."""
    form = GraphForm(GraphRegistry(open_store()))
    editing = st.session_state.get("editing")
    if editing:
        result = form.bind(editing)
        if not result.ok:
            st.error(result.message)
            st.session_state["editing"] = None
    return form


def render_graph_list(form: GraphForm) -> None:
    """Table of graphs with edit and remove actions."""
    graphs = form.registry.list_graphs()
    if not graphs:
        st.info("No graphs configured yet.")
        return

    for graph in graphs:
        col_name, col_dashboard, col_panel, col_edit, col_remove = st.columns([3, 3, 1, 1, 1])
        col_name.write(graph.name)
        col_dashboard.write(graph.dashboard)
        col_panel.write(graph.panel_id)
        if col_edit.button("Edit", key=f"edit_{graph.name}"):
            st.session_state["editing"] = graph.name
            st.rerun()
        if col_remove.button("Remove", key=f"remove_{graph.name}"):
            outcome = form.remove(graph.name)
            if outcome.success:
                st.session_state["flash"] = outcome.notification
            else:
                st.session_state["flash_errors"] = outcome.errors
            st.rerun()


def render_form(form: GraphForm) -> None:
    """Add/update form bound to the graph being edited."""
    with st.form("form_config_grafana_graph", clear_on_submit=form.bound_graph is None):
        submitted_values = {}
        for spec in GRAPH_FIELDS.values():
            submitted_values[spec.name] = st.text_input(
                spec.label + (" *" if spec.required else ""),
                value=form.values.get(spec.name, ""),
                placeholder=spec.placeholder,
                help=spec.description,
            )
        submitted = st.form_submit_button(form.submit_label)

    if submitted:
        outcome = form.submit(submitted_values)
        if outcome.success:
            st.session_state["editing"] = None
            st.session_state["flash"] = outcome.notification
            st.rerun()
        for error in outcome.errors:
            st.error(error)

    if form.bound_graph is not None and st.button("Cancel"):
        st.session_state["editing"] = None
        st.rerun()


def main():
    """Main dashboard function."""
    configure_logging()

    st.set_page_config(
        page_title="Grafana Graphs",
        page_icon="📊",
        layout="wide",
    )

    st.title("📊 Grafana Graphs")
    st.caption(f"Store: {settings.GRAPHS_STORE_BACKEND}")

    if "flash" in st.session_state:
        st.success(st.session_state.pop("flash"))
    for error in st.session_state.pop("flash_errors", []):
        st.error(error)

    form = build_form()
    try:
        st.subheader("Graphs")
        render_graph_list(form)

        st.subheader("Update graph" if form.bound_graph else "Add graph")
        render_form(form)
    finally:
        form.registry.store.close()


if __name__ == "__main__":
    main()
