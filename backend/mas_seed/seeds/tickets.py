"""Support desk data: SLA policies, tickets, ticket comments and field visits."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def _at(month: int, day: int, hour: int = 9, minute: int = 0) -> datetime:
    return datetime(2024, month, day, hour, minute, tzinfo=timezone.utc)


def _target(priority: str, response_minutes: int, resolution_hours: int) -> dict[str, Any]:
    return {
        "priority": priority,
        "responseMinutes": response_minutes,
        "resolutionHours": resolution_hours,
    }


SLA_POLICIES = [
    {
        "id": "sla-standard-support",
        "name": "Standard Support",
        "businessHoursOnly": True,
        "targets": [
            _target("critical", 60, 8),
            _target("high", 240, 24),
            _target("medium", 480, 72),
            _target("low", 1440, 120),
        ],
        "active": True,
    },
    {
        "id": "sla-premium-support",
        "name": "Premium Support",
        "businessHoursOnly": False,
        "targets": [
            _target("critical", 15, 4),
            _target("high", 60, 8),
            _target("medium", 240, 24),
            _target("low", 480, 72),
        ],
        "active": True,
    },
]


def _ticket(ticket_id: str, number: str, account_id: str, subject: str, status: str,
            priority: str, opened: datetime, *, assignee: str | None = "user-support-tech",
            reporter: str | None = None, project_id: str | None = None,
            sla_id: str = "sla-standard-support", category: str = "technical",
            sla_breached: bool = False) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": ticket_id,
        "ticketNumber": number,
        "accountId": account_id,
        "subject": subject,
        "status": status,
        "priority": priority,
        "category": category,
        "slaPolicyId": sla_id,
        "slaBreached": sla_breached,
        "openedAt": opened,
    }
    if assignee:
        record["assigneeId"] = assignee
    if reporter:
        record["reporterId"] = reporter
    if project_id:
        record["projectId"] = project_id
    return record


TICKETS = [
    _ticket("ticket-golden-spoon-system-down", "TKT-2024-0001", "account-golden-spoon",
            "POS system down at main branch", "in_progress", "critical", _at(3, 1, 11, 15),
            assignee="user-field-engineer", reporter="user-client-restaurant-owner",
            project_id="project-golden-spoon-pos"),
    _ticket("ticket-pizza-palace-payment-issue", "TKT-2024-0002", "account-pizza-palace",
            "Card payments failing intermittently", "open", "high", _at(3, 2, 14, 30),
            sla_id="sla-premium-support", category="payments"),
    _ticket("ticket-health-first-inventory-sync", "TKT-2024-0003", "account-health-first",
            "Inventory not syncing between branches", "in_progress", "high", _at(2, 27),
            reporter="user-client-pharmacy-owner", project_id="project-health-first-pos"),
    _ticket("ticket-techstore-report-error", "TKT-2024-0004", "account-tech-store",
            "Daily sales report shows wrong totals", "open", "medium", _at(3, 3, 10),
            assignee="user-support-lead", reporter="user-client-retail-manager", category="reporting"),
    _ticket("ticket-dental-clinic-training", "TKT-2024-0005", "account-dental-clinic",
            "Request training for new reception staff", "new", "low", _at(3, 4),
            assignee=None, project_id="project-dental-support", category="training"),
    _ticket("ticket-powergym-feature-request", "TKT-2024-0006", "account-fitness-center",
            "Add membership renewal reminders", "new", "low", _at(3, 5),
            assignee=None, sla_id="sla-premium-support", category="feature_request"),
    _ticket("ticket-beauty-salon-cosmetic", "TKT-2024-0007", "account-beauty-salon",
            "Logo blurry on printed receipts", "open", "low", _at(2, 20), category="cosmetic"),
    _ticket("ticket-fashion-hub-question", "TKT-2024-0008", "account-fashion-hub",
            "How to apply seasonal discounts?", "resolved", "medium", _at(2, 15),
            assignee="user-support-lead", category="question"),
    _ticket("ticket-resolved-printer-issue", "TKT-2024-0009", "account-golden-spoon",
            "Receipt printer paper jam", "closed", "medium", _at(2, 10),
            assignee="user-field-engineer", category="hardware"),
    _ticket("ticket-sla-breached-example", "TKT-2024-0010", "account-health-first",
            "Barcode scanner not recognised", "in_progress", "high", _at(2, 22),
            category="hardware", sla_breached=True),
    _ticket("ticket-waiting-customer", "TKT-2024-0011", "account-tech-store",
            "Need VPN credentials to continue", "waiting_customer", "medium", _at(2, 28),
            assignee="user-support-lead", category="network"),
]


def _comment(comment_id: str, ticket_id: str, author_id: str, content: str,
             posted: datetime, internal: bool = False) -> dict[str, Any]:
    return {
        "id": comment_id,
        "ticketId": ticket_id,
        "authorId": author_id,
        "content": content,
        "internal": internal,
        "postedAt": posted,
    }


TICKET_COMMENTS = [
    _comment("comment-001", "ticket-golden-spoon-system-down", "user-client-restaurant-owner",
             "All three terminals show a blank screen after the morning update.", _at(3, 1, 11, 15)),
    _comment("comment-002", "ticket-golden-spoon-system-down", "user-support-tech",
             "Remote session started, the database service is not running.", _at(3, 1, 11, 32), internal=True),
    _comment("comment-003", "ticket-golden-spoon-system-down", "user-field-engineer",
             "On my way to the main branch, ETA 40 minutes.", _at(3, 1, 12)),
    _comment("comment-004", "ticket-pizza-palace-payment-issue", "user-support-tech",
             "Gateway logs show timeouts from two of the twelve branches.", _at(3, 2, 15), internal=True),
    _comment("comment-005", "ticket-health-first-inventory-sync", "user-client-pharmacy-owner",
             "Stock levels at Heliopolis have not changed since Monday.", _at(2, 27, 9, 20)),
    _comment("comment-006", "ticket-health-first-inventory-sync", "user-support-tech",
             "Sync job failed on a schema change, patch scheduled tonight.", _at(2, 27, 16)),
    _comment("comment-007", "ticket-techstore-report-error", "user-support-lead",
             "Refunds are being counted twice in the daily total.", _at(3, 3, 13), internal=True),
    _comment("comment-008", "ticket-fashion-hub-question", "user-support-lead",
             "Sent a short guide on discount rules, closing after confirmation.", _at(2, 15, 11)),
    _comment("comment-009", "ticket-resolved-printer-issue", "user-field-engineer",
             "Replaced the printer roller on site.", _at(2, 11, 10)),
    _comment("comment-010", "ticket-sla-breached-example", "user-manager-support",
             "Escalating: response target missed.", _at(2, 23, 8), internal=True),
    _comment("comment-011", "ticket-waiting-customer", "user-support-lead",
             "Waiting on the client's IT team for VPN access.", _at(2, 28, 15)),
]


def _visit(visit_id: str, ticket_id: str, site_id: str, engineer_id: str, status: str,
           scheduled: datetime, purpose: str, duration_minutes: int = 120) -> dict[str, Any]:
    return {
        "id": visit_id,
        "ticketId": ticket_id,
        "clientSiteId": site_id,
        "engineerId": engineer_id,
        "status": status,
        "scheduledAt": scheduled,
        "estimatedDurationMinutes": duration_minutes,
        "purpose": purpose,
    }


VISITS = [
    _visit("visit-golden-spoon-emergency", "ticket-golden-spoon-system-down", "site-golden-spoon-main",
           "user-field-engineer", "in_progress", _at(3, 1, 12, 45), "Restore POS database service"),
    _visit("visit-printer-replacement", "ticket-resolved-printer-issue", "site-golden-spoon-branch1",
           "user-field-engineer", "completed", _at(2, 11, 9), "Replace receipt printer roller", 60),
    _visit("visit-training-scheduled", "ticket-health-first-inventory-sync", "site-health-first-main",
           "user-support-tech", "scheduled", _at(3, 12, 10), "Verify inventory sync after patch"),
    _visit("visit-network-setup-pending", "ticket-powergym-feature-request", "site-powergym-main",
           "user-field-engineer", "scheduled", _at(3, 15, 11), "Network assessment for reminder service", 90),
]
