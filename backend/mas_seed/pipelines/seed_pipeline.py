"""Seed orchestration pipeline.

    options → module selection → (reset) clear pass → seed pass → SeedReport

Orchestrates:
1. Check that a target project is configured.
2. Ask for confirmation before touching a production environment.
3. Resolve the selected modules against the registry.
4. With ``reset``: clear collections, modules in reverse registry order and
   each module's collections in reverse declaration order.
5. Seed collections, modules and collections in forward order.
6. Return a report with per-collection outcomes and totals.

Errors in steps 4-5 propagate unchanged; collections already written or
cleared stay that way.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Callable, Sequence

from mas_seed.config import Settings
from mas_seed.models.seed import (
    CollectionOutcome,
    CollectionStatus,
    ModuleSummary,
    SeedConfigurationError,
    SeedModule,
    SeedReport,
    SeedRunOptions,
)
from mas_seed.seeds.registry import SEED_MODULES, describe_modules, select_modules, validate_registry
from mas_seed.services.batch_writer import write_collection
from mas_seed.services.collection_clearer import clear_collection
from mas_seed.services.document_store import DocumentStore
from mas_seed.utils.dependency_graph import external_dependencies

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]

_SAMPLE_CHARS = 200


def _sample(record: dict) -> str:
    text = json.dumps(record, default=str, ensure_ascii=False)
    return text if len(text) <= _SAMPLE_CHARS else text[:_SAMPLE_CHARS] + "..."


class SeedPipeline:
    """Clear and seed demo data into a document store.

    Parameters
    ----------
    store:
        Target ``DocumentStore``.  Never accessed during a dry run.
    settings:
        Seeder settings (project id, environment, batch and page sizes).
    modules:
        The module registry; defaults to ``SEED_MODULES``.
    confirm:
        Called with a prompt before a production run without ``force``;
        returns whether to proceed.  Without it such runs are refused.
    """

    def __init__(
        self,
        store: DocumentStore,
        settings: Settings,
        modules: Sequence[SeedModule] = SEED_MODULES,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        self.store = store
        self.settings = settings
        self.modules = list(modules)
        self.confirm = confirm
        self._validated = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """Validate the registry once per pipeline."""
        if not self._validated:
            validate_registry(self.modules)
            self._validated = True

    def describe_modules(self) -> list[ModuleSummary]:
        self.validate()
        return describe_modules(self.modules)

    async def run(self, options: SeedRunOptions | None = None) -> SeedReport:
        """Execute one seeding run.

        Returns
        -------
        SeedReport
            ``cancelled`` is set when a production confirmation is declined;
            in that case nothing was read from or written to the store.
        """
        options = options or SeedRunOptions()
        self.validate()

        # 1 ── Target project ──────────────────────────────────────────
        project_id = self._require_project()
        report = SeedReport(
            project_id=project_id,
            environment=self.settings.ENVIRONMENT,
            dry_run=options.dry_run,
        )

        # 2 ── Production guard ────────────────────────────────────────
        if self.settings.is_production and not options.force:
            if not self._confirm_production(project_id, options):
                logger.info("Seeding cancelled by user")
                report.cancelled = True
                return report

        # 3 ── Module selection ────────────────────────────────────────
        selected = select_modules(options.modules, self.modules)
        report.modules = [m.name for m in selected]
        report.total_records = sum(m.record_count for m in selected)
        for collection, deps in external_dependencies(selected).items():
            logger.debug("%s assumes existing data in: %s", collection, ", ".join(deps))

        t0 = time.perf_counter()
        logger.info(
            "Seeding project %s (%s): modules=%s reset=%s dry_run=%s",
            project_id, self.settings.ENVIRONMENT, ",".join(report.modules),
            options.reset, options.dry_run,
        )

        # 4 ── Clear pass (reverse) ────────────────────────────────────
        if options.reset:
            for module in reversed(selected):
                await self._clear_module(module, options, report)

        # 5 ── Seed pass (forward) ─────────────────────────────────────
        for module in selected:
            await self._seed_module(module, options, report)

        logger.info(
            "Seeding finished in %.2fs: %d records%s",
            time.perf_counter() - t0, report.total_records,
            " (dry run)" if options.dry_run else "",
        )
        return report

    async def status(self) -> list[CollectionStatus]:
        """Probe every registered collection for existing documents."""
        self.validate()
        self._require_project()

        statuses: list[CollectionStatus] = []
        for module in self.modules:
            for collection in module.collections:
                try:
                    has_data = await self.store.has_documents(collection.name)
                    count = await self.store.count(collection.name) if has_data else 0
                    statuses.append(CollectionStatus(
                        module=module.name, collection=collection.name,
                        has_data=has_data, count=count,
                    ))
                except Exception as exc:
                    logger.warning("Status probe failed for %s", collection.name, exc_info=True)
                    statuses.append(CollectionStatus(
                        module=module.name, collection=collection.name, error=str(exc),
                    ))
        return statuses

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_project(self) -> str:
        project_id = (self.settings.PROJECT_ID or "").strip()
        if not project_id:
            raise SeedConfigurationError(
                "PROJECT_ID is not set; configure the target project in the environment or .env"
            )
        return project_id

    def _confirm_production(self, project_id: str, options: SeedRunOptions) -> bool:
        if self.confirm is None:
            raise SeedConfigurationError(
                f"Refusing to seed production project {project_id!r} without force"
            )
        action = "RESET and seed" if options.reset else "seed"
        message = (
            f"You are about to {action} the PRODUCTION project {project_id!r}. Continue?"
        )
        return bool(self.confirm(message))

    async def _clear_module(
        self, module: SeedModule, options: SeedRunOptions, report: SeedReport
    ) -> None:
        logger.info("Clearing module %s", module.name)
        for collection in reversed(module.collections):
            if options.dry_run:
                logger.info("[dry run] would clear %s", collection.name)
                cleared = 0
            else:
                cleared = await clear_collection(
                    self.store, collection.name, self.settings.SEED_CLEAR_PAGE_SIZE
                )
                report.total_cleared += cleared
            report.outcomes.append(CollectionOutcome(
                module=module.name, collection=collection.name, action="clear",
                records=cleared, dry_run=options.dry_run,
            ))

    async def _seed_module(
        self, module: SeedModule, options: SeedRunOptions, report: SeedReport
    ) -> None:
        logger.info("Seeding module %s: %s", module.name, module.description)
        for collection in module.collections:
            if options.verbose and collection.records:
                logger.info("%s sample: %s", collection.name, _sample(collection.records[0]))

            if options.dry_run:
                logger.info("[dry run] would seed %d records into %s",
                            collection.record_count, collection.name)
                records = collection.record_count
            else:
                records = await write_collection(
                    self.store,
                    collection.name,
                    collection.records,
                    self.settings.SEED_BATCH_SIZE,
                    actor=self.settings.SEED_ACTOR,
                    organization_id=options.organization_id,
                )
                report.total_written += records
            report.outcomes.append(CollectionOutcome(
                module=module.name, collection=collection.name, action="seed",
                records=records, dry_run=options.dry_run,
            ))
