"""Tests for the collection dependency graph checks."""

import pytest

from mas_seed.models.seed import SeedCollection, SeedGraphError, SeedModule
from mas_seed.seeds.registry import SEED_MODULES, get_module
from mas_seed.utils.dependency_graph import (
    build_graph,
    external_dependencies,
    topological_order,
    validate_declared_order,
)


def _module(name: str, *collections: tuple[str, list[str]]) -> SeedModule:
    return SeedModule(
        name=name,
        description=name,
        collections=[SeedCollection(name=c, dependencies=deps) for c, deps in collections],
    )


class TestRegistryGraph:

    def test_registry_declared_order_is_valid(self) -> None:
        validate_declared_order(SEED_MODULES)

    def test_topological_order_respects_dependencies(self) -> None:
        order = topological_order(SEED_MODULES)
        position = {name: i for i, name in enumerate(order)}
        for deps_of, deps in build_graph(SEED_MODULES).items():
            for dep in deps:
                assert position[dep] < position[deps_of]

    def test_graph_contains_every_collection(self) -> None:
        graph = build_graph(SEED_MODULES)
        assert graph["userRoles"] == {"users", "roles"}
        assert graph["organizations"] == set()
        assert len(graph) == sum(len(m.collections) for m in SEED_MODULES)


class TestGraphErrors:

    def test_cycle_is_rejected(self) -> None:
        modules = [_module("m", ("a", ["b"]), ("b", ["a"]))]
        with pytest.raises(SeedGraphError, match="cycle"):
            topological_order(modules)

    def test_dependency_declared_after_dependent(self) -> None:
        modules = [_module("first", ("child", ["parent"])), _module("second", ("parent", []))]
        with pytest.raises(SeedGraphError, match="declared before"):
            validate_declared_order(modules)

    def test_unknown_dependency(self) -> None:
        modules = [_module("m", ("child", ["ghost"]))]
        with pytest.raises(SeedGraphError, match="unknown"):
            validate_declared_order(modules)

    def test_duplicate_collection(self) -> None:
        modules = [_module("one", ("users", [])), _module("two", ("users", []))]
        with pytest.raises(SeedGraphError, match="declared by both"):
            validate_declared_order(modules)

    def test_self_dependency(self) -> None:
        modules = [_module("m", ("loop", ["loop"]))]
        with pytest.raises(SeedGraphError):
            validate_declared_order(modules)


def test_external_dependencies_of_partial_selection() -> None:
    missing = external_dependencies([get_module("hr")])
    assert missing == {"interviews": ["users"], "onboardingTasks": ["users"]}
    assert external_dependencies(SEED_MODULES) == {}
