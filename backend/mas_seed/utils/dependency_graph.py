"""Dependency graph over seed collections.

Each collection declares the collections it references.  The registry is
walked in declaration order (forward to seed, backwards to clear), so that
order must already be a valid topological order of this graph.  The helpers
here build the graph, sort it, and reject registries whose declared order
would seed a collection before one of its dependencies.
"""

from __future__ import annotations

import logging
from graphlib import CycleError, TopologicalSorter
from typing import Sequence

from mas_seed.models.seed import SeedGraphError, SeedModule

logger = logging.getLogger(__name__)


def build_graph(modules: Sequence[SeedModule]) -> dict[str, set[str]]:
    """Map every collection name to the set of collections it depends on."""
    graph: dict[str, set[str]] = {}
    for module in modules:
        for collection in module.collections:
            graph.setdefault(collection.name, set()).update(collection.dependencies)
    return graph


def topological_order(modules: Sequence[SeedModule]) -> list[str]:
    """Return the collections in an order where dependencies come first.

    Raises ``SeedGraphError`` naming the cycle if the graph is not acyclic.
    """
    sorter = TopologicalSorter(build_graph(modules))
    try:
        return list(sorter.static_order())
    except CycleError as exc:
        cycle = exc.args[1] if len(exc.args) > 1 else []
        raise SeedGraphError(
            "Dependency cycle between collections: " + " -> ".join(cycle)
        ) from exc


def validate_declared_order(modules: Sequence[SeedModule]) -> None:
    """Check that the registry order respects every declared dependency.

    Raises ``SeedGraphError`` when a collection name is declared twice, a
    dependency names an unknown collection, or a dependency is declared
    after the collection that needs it.
    """
    position: dict[str, int] = {}
    owner: dict[str, str] = {}
    for module in modules:
        for collection in module.collections:
            if collection.name in position:
                raise SeedGraphError(
                    f"Collection {collection.name!r} is declared by both "
                    f"{owner[collection.name]!r} and {module.name!r}"
                )
            position[collection.name] = len(position)
            owner[collection.name] = module.name

    for module in modules:
        for collection in module.collections:
            for dep in collection.dependencies:
                if dep not in position:
                    raise SeedGraphError(
                        f"Collection {collection.name!r} ({module.name}) depends on "
                        f"unknown collection {dep!r}"
                    )
                if position[dep] >= position[collection.name]:
                    raise SeedGraphError(
                        f"Collection {collection.name!r} ({module.name}) is declared before "
                        f"its dependency {dep!r} ({owner[dep]})"
                    )


def external_dependencies(selected: Sequence[SeedModule]) -> dict[str, list[str]]:
    """Dependencies of the selected collections that the selection does not seed.

    Used to note collections a partial run assumes are already present.
    """
    names = {c.name for m in selected for c in m.collections}
    missing: dict[str, list[str]] = {}
    for module in selected:
        for collection in module.collections:
            outside = [d for d in collection.dependencies if d not in names]
            if outside:
                missing[collection.name] = outside
    return missing
