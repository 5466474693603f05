"""Tests for the seed module registry and module selection."""

import logging

import pytest

from mas_seed.models.seed import SeedConfigurationError
from mas_seed.seeds.registry import (
    SEED_MODULES,
    describe_modules,
    get_module,
    module_names,
    select_modules,
    validate_registry,
)

EXPECTED_ORDER = [
    "core", "users", "accounts", "projects", "finance",
    "products", "support", "lms", "hr", "communication",
]


class TestRegistryContents:

    def test_module_order(self) -> None:
        assert module_names() == EXPECTED_ORDER

    def test_core_module(self) -> None:
        core = get_module("core")
        assert [(c.name, c.record_count) for c in core.collections] == [
            ("organizations", 1), ("settings", 1), ("departments", 6), ("roles", 10),
        ]
        assert core.record_count == 18

    def test_hr_module(self) -> None:
        hr = get_module("hr")
        assert [(c.name, c.record_count) for c in hr.collections] == [
            ("candidates", 15), ("interviews", 7), ("onboardingTemplates", 3), ("onboardingTasks", 4),
        ]
        assert hr.record_count == 29

    def test_user_roles_have_composite_ids(self) -> None:
        user_roles = get_module("users").collections[1]
        assert user_roles.name == "userRoles"
        for record in user_roles.records:
            assert record["id"] == f"{record['userId']}_{record['roleId']}"

    def test_products_merge_hardware_and_digital(self) -> None:
        products = get_module("products").collections[0]
        kinds = {r["type"] for r in products.records}
        assert kinds == {"hardware", "digital"}

    def test_validate_registry_returns_every_collection(self) -> None:
        order = validate_registry()
        assert len(order) == sum(len(m.collections) for m in SEED_MODULES)

    def test_get_unknown_module(self) -> None:
        assert get_module("nope") is None

    def test_describe_modules(self) -> None:
        summaries = describe_modules()
        assert [s.name for s in summaries] == EXPECTED_ORDER
        hr = summaries[EXPECTED_ORDER.index("hr")]
        assert hr.total_records == 29
        assert hr.collections == ["candidates", "interviews", "onboardingTemplates", "onboardingTasks"]


class TestSelectModules:

    def test_none_selects_all(self) -> None:
        assert [m.name for m in select_modules(None)] == EXPECTED_ORDER

    def test_selection_keeps_registry_order(self) -> None:
        assert [m.name for m in select_modules(["hr", "core"])] == ["core", "hr"]

    def test_duplicates_collapse(self) -> None:
        assert [m.name for m in select_modules(["core", "core", " core "])] == ["core"]

    def test_unknown_names_are_skipped_with_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            selected = select_modules(["core", "doesnotexist"])
        assert [m.name for m in selected] == ["core"]
        assert "doesnotexist" in caplog.text

    @pytest.mark.parametrize("names", [["doesnotexist"], [], [""]])
    def test_empty_selection_is_an_error(self, names) -> None:
        with pytest.raises(SeedConfigurationError, match="No valid modules specified"):
            select_modules(names)
