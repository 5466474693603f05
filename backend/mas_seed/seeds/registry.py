"""
Seed module registry.

``SEED_MODULES`` is the fixed, ordered list of demo-data modules.  Order
matters: seeding walks it forward, clearing walks it backwards, and every
collection's declared dependencies must appear earlier in the list
(checked by ``validate_registry``).
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from mas_seed.models.records import validate_collection
from mas_seed.models.seed import ModuleSummary, SeedCollection, SeedConfigurationError, SeedModule
from mas_seed.seeds.accounts import ACCOUNTS, CLIENT_SITES
from mas_seed.seeds.announcements import ANNOUNCEMENTS, NOTIFICATIONS, PORTAL_INVITES
from mas_seed.seeds.candidates import CANDIDATES, INTERVIEWS, ONBOARDING_TASKS, ONBOARDING_TEMPLATES
from mas_seed.seeds.courses import ASSIGNMENTS, COURSES, LESSONS, QUIZZES
from mas_seed.seeds.departments import DEPARTMENTS
from mas_seed.seeds.invoices import CONTRACTS, FIN_ACCOUNTS, INVOICES, PAYMENTS, TRANSACTIONS
from mas_seed.seeds.organizations import ORGANIZATIONS, SETTINGS
from mas_seed.seeds.products import BUNDLES, INVENTORY, PRICEBOOK_ENTRIES, PRICEBOOKS, PRODUCTS, SERVICES
from mas_seed.seeds.projects import PHASES, PROJECT_TEMPLATES, PROJECT_TYPES, PROJECTS, TASKS
from mas_seed.seeds.roles import ROLES
from mas_seed.seeds.tickets import SLA_POLICIES, TICKET_COMMENTS, TICKETS, VISITS
from mas_seed.seeds.users import USER_ROLES, USERS
from mas_seed.utils.dependency_graph import topological_order, validate_declared_order

logger = logging.getLogger(__name__)


def _c(name: str, records: list[dict], *dependencies: str) -> SeedCollection:
    return SeedCollection(name=name, records=records, dependencies=list(dependencies))


SEED_MODULES: list[SeedModule] = [
    SeedModule(
        name="core",
        description="Core system data (organizations, departments, roles)",
        collections=[
            _c("organizations", ORGANIZATIONS),
            _c("settings", SETTINGS),
            _c("departments", DEPARTMENTS),
            _c("roles", ROLES),
        ],
    ),
    SeedModule(
        name="users",
        description="Users and role assignments",
        collections=[
            _c("users", USERS, "departments"),
            _c("userRoles", USER_ROLES, "users", "roles"),
        ],
    ),
    SeedModule(
        name="accounts",
        description="Client accounts and sites",
        collections=[
            _c("accounts", ACCOUNTS, "users"),
            _c("clientSites", CLIENT_SITES, "accounts"),
        ],
    ),
    SeedModule(
        name="projects",
        description="Project types, templates, projects, phases and tasks",
        collections=[
            _c("projectTypes", PROJECT_TYPES),
            _c("projectTemplates", PROJECT_TEMPLATES, "projectTypes"),
            _c("projects", PROJECTS, "accounts", "projectTypes", "users"),
            _c("phases", PHASES, "projects"),
            _c("tasks", TASKS, "projects", "phases", "users"),
        ],
    ),
    SeedModule(
        name="finance",
        description="Invoices, payments, and financial data",
        collections=[
            _c("finAccounts", FIN_ACCOUNTS),
            _c("contracts", CONTRACTS, "accounts"),
            _c("invoices", INVOICES, "accounts", "projects", "contracts"),
            _c("payments", PAYMENTS, "invoices", "accounts"),
            _c("transactions", TRANSACTIONS, "finAccounts", "projects"),
        ],
    ),
    SeedModule(
        name="products",
        description="Products, services, and inventory",
        collections=[
            _c("products", PRODUCTS),
            _c("services", SERVICES),
            _c("bundles", BUNDLES, "products", "services"),
            _c("pricebooks", PRICEBOOKS),
            _c("pricebookEntries", PRICEBOOK_ENTRIES, "pricebooks", "products", "services"),
            _c("inventory", INVENTORY, "products"),
        ],
    ),
    SeedModule(
        name="support",
        description="Support tickets and SLA policies",
        collections=[
            _c("slaPolicies", SLA_POLICIES),
            _c("tickets", TICKETS, "accounts", "projects", "slaPolicies", "users"),
            _c("ticketComments", TICKET_COMMENTS, "tickets", "users"),
            _c("visits", VISITS, "tickets", "clientSites", "users"),
        ],
    ),
    SeedModule(
        name="lms",
        description="Learning management system data",
        collections=[
            _c("courses", COURSES),
            _c("lessons", LESSONS, "courses"),
            _c("quizzes", QUIZZES, "courses", "lessons"),
            _c("assignments", ASSIGNMENTS, "courses", "users", "accounts"),
        ],
    ),
    SeedModule(
        name="hr",
        description="HR and recruitment data",
        collections=[
            _c("candidates", CANDIDATES),
            _c("interviews", INTERVIEWS, "candidates", "users"),
            _c("onboardingTemplates", ONBOARDING_TEMPLATES),
            _c("onboardingTasks", ONBOARDING_TASKS, "users", "onboardingTemplates"),
        ],
    ),
    SeedModule(
        name="communication",
        description="Announcements, notifications, and portal invites",
        collections=[
            _c("announcements", ANNOUNCEMENTS),
            _c("notifications", NOTIFICATIONS, "users"),
            _c("portalInvites", PORTAL_INVITES, "accounts", "candidates", "users"),
        ],
    ),
]


def module_names(modules: Sequence[SeedModule] = SEED_MODULES) -> list[str]:
    return [m.name for m in modules]


def get_module(name: str, modules: Sequence[SeedModule] = SEED_MODULES) -> SeedModule | None:
    for module in modules:
        if module.name == name:
            return module
    return None


def select_modules(
    names: Iterable[str] | None,
    modules: Sequence[SeedModule] = SEED_MODULES,
) -> list[SeedModule]:
    """
    Resolve a module selection against the registry.

    Parameters
    ----------
    names : iterable of module names, or None for every module.
    modules : the registry to select from.

    Returns the selected modules in registry order, without duplicates.
    Unknown names are logged and skipped; a selection that resolves to
    nothing raises ``SeedConfigurationError``.
    """
    if names is None:
        return list(modules)

    wanted = {n.strip() for n in names if n and n.strip()}
    known = set(module_names(modules))
    unknown = sorted(wanted - known)
    if unknown:
        logger.warning("Unknown seed modules ignored: %s", ", ".join(unknown))

    selected = [m for m in modules if m.name in wanted]
    if not selected:
        raise SeedConfigurationError(
            "No valid modules specified. Available modules: "
            + ", ".join(module_names(modules))
        )
    return selected


def describe_modules(modules: Sequence[SeedModule] = SEED_MODULES) -> list[ModuleSummary]:
    return [
        ModuleSummary(
            name=m.name,
            description=m.description,
            collections=m.collection_names,
            total_records=m.record_count,
        )
        for m in modules
    ]


def validate_registry(modules: Sequence[SeedModule] = SEED_MODULES) -> list[str]:
    """
    Check the registry before anything touches the store.

    Verifies that dependencies are declared before their dependents, that
    the collection graph is acyclic, and that every record matches its
    collection schema.  Returns the topological order of collections.
    """
    validate_declared_order(modules)
    order = topological_order(modules)
    for module in modules:
        for collection in module.collections:
            validate_collection(collection)
    logger.debug("Registry validated: %d modules, %d collections", len(modules), len(order))
    return order
