"""Per-collection record schemas for seed data.

Each store collection the seeder writes has a schema here; together they
form a closed set keyed by collection name (``RECORD_SCHEMAS``).  Schemas
pin the identifying fields of a record and let everything else through
untouched (``extra="allow"``), so the stored document is exactly the seed
record.  Validation runs when the registry is loaded, before any write.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mas_seed.models.seed import SeedCollection, SeedValidationError


# ---------------------------------------------------------------------------
# Enums / Literals
# ---------------------------------------------------------------------------

CandidateStage = Literal[
    "applied", "shortlist", "invited", "training",
    "interview", "offer", "hired", "rejected",
]

ProjectStatus = Literal[
    "draft", "planning", "in_progress", "on_hold", "completed", "cancelled",
]

TaskStatus = Literal["todo", "in_progress", "review", "completed", "blocked"]

TicketPriority = Literal["low", "medium", "high", "critical"]

PortalType = Literal["client", "candidate", "employee"]


# ---------------------------------------------------------------------------
# Base record
# ---------------------------------------------------------------------------

class SeedRecord(BaseModel):
    """Every seed record carries a non-empty ``id`` used as the document key."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# core / users
# ---------------------------------------------------------------------------

class OrganizationRecord(SeedRecord):
    name: str
    baseCurrency: str = "USD"


class SettingsRecord(SeedRecord):
    organizationId: str
    modules: dict[str, bool] = Field(default_factory=dict)


class DepartmentRecord(SeedRecord):
    name: str
    code: str


class Permission(BaseModel):
    resource: str
    actions: list[Literal["create", "read", "update", "delete"]]
    scope: Literal["all", "department", "own"]


class RoleRecord(SeedRecord):
    name: str
    permissions: list[Permission]


class UserRecord(SeedRecord):
    email: str
    name: str


class UserRoleRecord(SeedRecord):
    userId: str
    roleId: str


# ---------------------------------------------------------------------------
# accounts / projects
# ---------------------------------------------------------------------------

class AccountRecord(SeedRecord):
    name: str
    type: Literal["customer", "partner", "prospect", "vendor"]


class ClientSiteRecord(SeedRecord):
    accountId: str
    name: str


class ProjectTypeRecord(SeedRecord):
    name: str
    code: str


class ProjectTemplateRecord(SeedRecord):
    name: str
    projectTypeId: str


class ProjectRecord(SeedRecord):
    name: str
    code: str
    accountId: str
    status: ProjectStatus


class PhaseRecord(SeedRecord):
    projectId: str
    name: str
    order: int


class TaskRecord(SeedRecord):
    projectId: str
    title: str
    status: TaskStatus


# ---------------------------------------------------------------------------
# finance / products
# ---------------------------------------------------------------------------

class FinAccountRecord(SeedRecord):
    name: str
    type: Literal["revenue", "bank", "expense", "cash"]
    currency: str


class ContractRecord(SeedRecord):
    accountId: str
    contractNumber: str
    status: Literal["draft", "active", "expired", "terminated"]


class InvoiceRecord(SeedRecord):
    invoiceNumber: str
    accountId: str
    status: Literal["draft", "sent", "partially_paid", "paid", "overdue", "cancelled"]
    total: float


class PaymentRecord(SeedRecord):
    paymentNumber: str
    invoiceId: str
    amount: float


class TransactionRecord(SeedRecord):
    transactionNumber: str
    type: Literal["income", "expense", "transfer"]
    amount: float


class ProductRecord(SeedRecord):
    sku: str
    name: str


class ServiceRecord(SeedRecord):
    code: str
    name: str


class BundleRecord(SeedRecord):
    name: str
    components: list[dict[str, Any]]


class PricebookRecord(SeedRecord):
    name: str
    currency: str


class PricebookEntryRecord(SeedRecord):
    pricebookId: str
    itemId: str
    unitPrice: float


class InventoryRecord(SeedRecord):
    productId: str
    quantity: int


# ---------------------------------------------------------------------------
# support / lms
# ---------------------------------------------------------------------------

class SlaPolicyRecord(SeedRecord):
    name: str
    targets: list[dict[str, Any]] = Field(default_factory=list)


class TicketRecord(SeedRecord):
    ticketNumber: str
    accountId: str
    subject: str
    status: Literal["new", "open", "in_progress", "waiting_customer", "resolved", "closed"]
    priority: TicketPriority


class TicketCommentRecord(SeedRecord):
    ticketId: str
    authorId: str
    content: str


class VisitRecord(SeedRecord):
    ticketId: str
    clientSiteId: str
    status: Literal["scheduled", "in_progress", "completed", "cancelled"]


class CourseRecord(SeedRecord):
    title: str
    audience: Literal["employee", "client", "candidate"]


class LessonRecord(SeedRecord):
    courseId: str
    title: str
    order: int


class QuizRecord(SeedRecord):
    courseId: str
    title: str
    questions: list[dict[str, Any]]


class AssignmentRecord(SeedRecord):
    courseId: str
    status: Literal["assigned", "in_progress", "completed", "overdue"]


# ---------------------------------------------------------------------------
# hr / communication
# ---------------------------------------------------------------------------

class CandidateRecord(SeedRecord):
    name: str
    email: str
    stage: CandidateStage


class InterviewRecord(SeedRecord):
    candidateId: str
    type: Literal["phone", "technical", "hr", "final"]
    status: Literal["scheduled", "completed", "cancelled", "no_show"]


class OnboardingTemplateRecord(SeedRecord):
    name: str
    tasks: list[dict[str, Any]]


class OnboardingTaskRecord(SeedRecord):
    userId: str
    templateId: str
    title: str
    status: Literal["pending", "in_progress", "completed"]


class AnnouncementRecord(SeedRecord):
    title: str
    content: str
    type: Literal["info", "success", "warning", "error"]


class NotificationRecord(SeedRecord):
    userId: str
    type: Literal["info", "success", "warning", "error"]
    title: str


class PortalInviteRecord(SeedRecord):
    email: str
    portalType: PortalType
    status: Literal["pending", "accepted", "expired", "revoked"]


RECORD_SCHEMAS: dict[str, type[SeedRecord]] = {
    "organizations": OrganizationRecord,
    "settings": SettingsRecord,
    "departments": DepartmentRecord,
    "roles": RoleRecord,
    "users": UserRecord,
    "userRoles": UserRoleRecord,
    "accounts": AccountRecord,
    "clientSites": ClientSiteRecord,
    "projectTypes": ProjectTypeRecord,
    "projectTemplates": ProjectTemplateRecord,
    "projects": ProjectRecord,
    "phases": PhaseRecord,
    "tasks": TaskRecord,
    "finAccounts": FinAccountRecord,
    "contracts": ContractRecord,
    "invoices": InvoiceRecord,
    "payments": PaymentRecord,
    "transactions": TransactionRecord,
    "products": ProductRecord,
    "services": ServiceRecord,
    "bundles": BundleRecord,
    "pricebooks": PricebookRecord,
    "pricebookEntries": PricebookEntryRecord,
    "inventory": InventoryRecord,
    "slaPolicies": SlaPolicyRecord,
    "tickets": TicketRecord,
    "ticketComments": TicketCommentRecord,
    "visits": VisitRecord,
    "courses": CourseRecord,
    "lessons": LessonRecord,
    "quizzes": QuizRecord,
    "assignments": AssignmentRecord,
    "candidates": CandidateRecord,
    "interviews": InterviewRecord,
    "onboardingTemplates": OnboardingTemplateRecord,
    "onboardingTasks": OnboardingTaskRecord,
    "announcements": AnnouncementRecord,
    "notifications": NotificationRecord,
    "portalInvites": PortalInviteRecord,
}


def schema_for(collection: str) -> type[SeedRecord]:
    """Schema for *collection*; unknown collections only need an ``id``."""
    return RECORD_SCHEMAS.get(collection, SeedRecord)


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<record>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validate_collection(collection: SeedCollection) -> None:
    """Validate every record of *collection* against its schema.

    Raises ``SeedValidationError`` on the first malformed record or on a
    duplicated ``id``.  Records are not modified.
    """
    schema = schema_for(collection.name)
    seen: set[str] = set()

    for index, record in enumerate(collection.records):
        try:
            schema.model_validate(record)
        except ValidationError as exc:
            record_id = record.get("id", f"#{index}") if isinstance(record, dict) else f"#{index}"
            raise SeedValidationError(
                f"Invalid record {record_id!r} in collection {collection.name!r}: "
                f"{_format_errors(exc)}"
            ) from exc

        record_id = record["id"]
        if record_id in seen:
            raise SeedValidationError(
                f"Duplicate id {record_id!r} in collection {collection.name!r}"
            )
        seen.add(record_id)
