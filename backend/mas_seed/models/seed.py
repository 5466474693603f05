"""Pydantic models for seed modules, run options, and run reports.

Defines the registry shapes (``SeedModule`` / ``SeedCollection``), the
options accepted by the orchestrator, the report it returns, and the
exceptions raised when a run cannot start.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class SeedConfigurationError(ValueError):
    """Missing project id, empty module selection, or refused production run."""


class SeedValidationError(ValueError):
    """A seed record does not match the schema of its collection."""


class SeedGraphError(ValueError):
    """Collection dependencies form a cycle or are declared out of order."""


# ---------------------------------------------------------------------------
# Registry models
# ---------------------------------------------------------------------------

class SeedCollection(BaseModel):
    """A named store collection and the records seeded into it."""

    name: str
    records: list[dict[str, Any]] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)

    @property
    def record_count(self) -> int:
        return len(self.records)


class SeedModule(BaseModel):
    """A group of related collections seeded and cleared together."""

    name: str
    description: str
    collections: list[SeedCollection] = Field(default_factory=list)

    @property
    def record_count(self) -> int:
        return sum(c.record_count for c in self.collections)

    @property
    def collection_names(self) -> list[str]:
        return [c.name for c in self.collections]


class ModuleSummary(BaseModel):
    """Listing entry for a module (``list`` command / ``GET /modules``)."""

    name: str
    description: str
    collections: list[str]
    total_records: int


# ---------------------------------------------------------------------------
# Run options / results
# ---------------------------------------------------------------------------

class SeedRunOptions(BaseModel):
    """Options recognised by the orchestrator. ``modules=None`` means all."""

    modules: list[str] | None = None
    reset: bool = False
    dry_run: bool = False
    verbose: bool = False
    force: bool = False
    organization_id: str | None = None


class CollectionOutcome(BaseModel):
    """What happened to one collection during a run."""

    module: str
    collection: str
    action: Literal["seed", "clear"]
    records: int
    dry_run: bool = False


class SeedReport(BaseModel):
    """Result of a single orchestrator run."""

    project_id: str | None = None
    environment: str = "development"
    dry_run: bool = False
    cancelled: bool = False
    modules: list[str] = Field(default_factory=list)
    outcomes: list[CollectionOutcome] = Field(default_factory=list)
    total_records: int = 0
    total_written: int = 0
    total_cleared: int = 0

    def seeded_collections(self) -> list[str]:
        return [o.collection for o in self.outcomes if o.action == "seed"]

    def cleared_collections(self) -> list[str]:
        return [o.collection for o in self.outcomes if o.action == "clear"]


class CollectionStatus(BaseModel):
    """Presence probe for one collection (``status`` command)."""

    module: str
    collection: str
    has_data: bool | None = None
    count: int | None = None
    error: str | None = None
