"""CLI script to initialize the graph store and load seed graphs."""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from ..config.settings import configure_logging, settings
from ..models.graph_registry import GraphRegistry
from .stores.factory import open_store


def load_seed(path: str) -> Dict[str, Dict[str, object]]:
    """Read seed graphs from a YAML file.

    Expected layout::

        graphs:
          my-service:
            dashboard: Hosts
            panelId: 1

    Args:
        path: Path to the YAML file

    Returns:
        Mapping of graph name to its values (empty if the file has no graphs)

    Raises:
        ValueError: If "graphs" is not a mapping of mappings
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with a 'graphs' key")

    graphs = data.get("graphs") or {}
    if not isinstance(graphs, dict) or not all(isinstance(v, dict) for v in graphs.values()):
        raise ValueError(f"{path}: 'graphs' must map graph names to dashboard/panelId values")
    return {str(name): values for name, values in graphs.items()}


def seed_graphs(
    registry: GraphRegistry,
    seed: Dict[str, Dict[str, object]]
) -> Tuple[List[str], List[str], List[str]]:
    """Add seed graphs, overwriting graphs that already exist.

    Returns:
        Tuple of (added, updated, failed) graph names
    """
    added, updated, failed = [], [], []

    for name, values in seed.items():
        if registry.store.has_section(name):
            result = registry.update(name, values, name)
            target = updated
        else:
            result = registry.add(name, values)
            target = added

        if result.ok:
            target.append(name)
        else:
            print(f"  Skipping {name}: {result.message}")
            failed.append(name)

    return added, updated, failed


def main(argv: Optional[List[str]] = None):
    """Create the configured store and load seed graphs into it."""
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    seed_path = argv[0] if argv else settings.GRAPHS_SEED_PATH

    seed = {}
    if seed_path:
        if not Path(seed_path).exists():
            print(f"Seed file not found: {seed_path}", file=sys.stderr)
            sys.exit(1)
        print(f"Loading seed graphs from {seed_path}...")
        try:
            seed = load_seed(seed_path)
        except (yaml.YAMLError, ValueError) as e:
            print(f"Error reading seed file: {e}", file=sys.stderr)
            sys.exit(1)

    print(f"Initializing {settings.GRAPHS_STORE_BACKEND} graph store...")
    store = open_store()

    try:
        registry = GraphRegistry(store)
        added, updated, failed = seed_graphs(registry, seed)

        result = registry.commit()
        if not result.ok:
            print(f"Error initializing graph store: {result.message}", file=sys.stderr)
            sys.exit(1)

        print("Graph store initialized successfully!")
        print(f"Added {len(added)}, updated {len(updated)}, skipped {len(failed)} graph(s)")
        print(f"Store now holds {len(registry.list_graphs())} graph(s)")
    finally:
        store.close()


if __name__ == "__main__":
    main()
