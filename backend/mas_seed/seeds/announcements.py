"""Communication data: announcements, per-user notifications and portal invitations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def _at(month: int, day: int, hour: int = 9) -> datetime:
    return datetime(2024, month, day, hour, tzinfo=timezone.utc)


def _announcement(announcement_id: str, title: str, content: str, kind: str, audience: list[str],
                  published: datetime, expires: datetime | None = None,
                  pinned: bool = False) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": announcement_id,
        "title": title,
        "content": content,
        "type": kind,
        "targetAudience": audience,
        "publishedAt": published,
        "pinned": pinned,
    }
    if expires:
        record["expiresAt"] = expires
    return record


ANNOUNCEMENTS = [
    _announcement("announcement-welcome-2024", "Welcome to MAS Business OS",
                  "Our new integrated business operating system is live. Please complete your profile "
                  "and explore the features available in your portal.",
                  "success", ["employees"], _at(3, 1), _at(4, 1), pinned=True),
    _announcement("announcement-system-maintenance", "Scheduled System Maintenance",
                  "The system will be unavailable on Saturday, March 30th from 2:00 AM to 6:00 AM (Egypt Time).",
                  "warning", ["all"], _at(3, 25, 14), _at(3, 31), pinned=True),
    _announcement("announcement-training-program", "New Employee Training Program Available",
                  "Assigned courses are now available in the Learning Management System.",
                  "info", ["employees"], _at(3, 5)),
    _announcement("announcement-client-portal-features", "New Client Portal Features",
                  "Clients can now track project milestones and pay invoices online.",
                  "info", ["clients"], _at(3, 10)),
    _announcement("announcement-security-update", "Mandatory Password Update",
                  "All users must update their password before April 15th.",
                  "error", ["all"], _at(3, 20), _at(4, 15), pinned=True),
    _announcement("announcement-q1-results", "Q1 2024 Results",
                  "Revenue grew 15% over the previous quarter. Thank you all for your hard work.",
                  "success", ["employees"], _at(4, 2)),
    _announcement("announcement-new-partnership", "New Payment Gateway Partnership",
                  "We now support Paymob for local card payments across all POS installations.",
                  "info", ["employees", "clients"], _at(3, 15)),
    _announcement("announcement-candidate-portal-launch", "Candidate Portal Launched",
                  "Candidates can now track their application and complete pre-hire training online.",
                  "info", ["candidates"], _at(3, 8)),
    _announcement("announcement-mobile-app-update", "Mobile App Version 2.1",
                  "The latest mobile release adds offline mode and faster sync.",
                  "info", ["clients"], _at(3, 18)),
    _announcement("announcement-office-expansion", "Office Expansion",
                  "A new Alexandria office opens in June. Relocation requests are open until May 1st.",
                  "info", ["employees"], _at(3, 28)),
]


def _notification(notification_id: str, user_id: str, kind: str, title: str, message: str,
                  entity_type: str | None = None, entity_id: str | None = None,
                  read: bool = False) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": notification_id,
        "userId": user_id,
        "type": kind,
        "title": title,
        "message": message,
        "read": read,
    }
    if entity_type and entity_id:
        record["entityType"] = entity_type
        record["entityId"] = entity_id
    return record


NOTIFICATIONS = [
    _notification("notif-ceo-monthly-report", "user-ceo", "info", "Monthly Executive Report Available",
                  "The March 2024 executive report is ready for review.", "report", "report-executive-march-2024"),
    _notification("notif-ceo-sla-breach", "user-ceo", "warning", "SLA Breach Alert",
                  "Ticket TKT-2024-0010 has breached its SLA.", "ticket", "ticket-sla-breached-example"),
    _notification("notif-pm-budget-warning", "user-pos-analyst", "warning", "Budget Threshold Reached",
                  "Golden Spoon POS has used 80% of its budget.", "project", "project-golden-spoon-pos"),
    _notification("notif-pm-milestone-complete", "user-pos-analyst", "success", "Milestone Completed",
                  "System Configuration phase completed for Golden Spoon.", "phase", "phase-gs-config", read=True),
    _notification("notif-support-ticket-assigned", "user-support-tech", "info", "New Ticket Assigned",
                  "You have been assigned TKT-2024-0001.", "ticket", "ticket-golden-spoon-system-down"),
    _notification("notif-support-sla-warning", "user-support-lead", "warning", "SLA Deadline Approaching",
                  "TKT-2024-0004 response is due within 30 minutes.", "ticket", "ticket-techstore-report-error"),
    _notification("notif-finance-payment-received", "user-accountant", "success", "Payment Received",
                  "Golden Spoon paid 7,500 USD against INV-2024-0002.", "payment", "payment-golden-spoon-partial"),
    _notification("notif-finance-invoice-overdue", "user-billing-specialist", "error", "Invoice Overdue",
                  "INV-2024-0005 for Fashion Hub is overdue.", "invoice", "invoice-fashion-hub-overdue"),
    _notification("notif-hr-interview-scheduled", "user-hr-recruiter", "info", "Interview Scheduled",
                  "HR competency interview with Heba Mostafa on March 28th.", "interview",
                  "interview-heba-hr-competency"),
    _notification("notif-hr-training-completed", "user-manager-hr", "success", "Training Completed",
                  "Layla Abdel-Rahman completed the technical assessment.", "assignment",
                  "assignment-tech-assessment-candidate1", read=True),
    _notification("notif-employee-task-due", "user-pos-developer", "warning", "Task Due Soon",
                  "Transform Customer Data Format is due in 2 days.", "task", "task-gs-data-transform"),
    _notification("notif-employee-timesheet-reminder", "user-frontend-developer", "info", "Timesheet Reminder",
                  "Please submit this week's timesheet by Friday."),
    _notification("notif-client-project-update", "user-client-restaurant-owner", "info", "Project Update",
                  "Data migration for your POS project is 60% complete.", "project", "project-golden-spoon-pos"),
    _notification("notif-client-invoice-available", "user-client-retail-manager", "info", "New Invoice",
                  "Invoice INV-2024-0003 is available in your portal.", "invoice", "invoice-techstore-milestone1"),
]


def _invite(invite_id: str, email: str, portal_type: str, status: str, invited_by: str,
            sent: datetime, expires: datetime, **target: str) -> dict[str, Any]:
    return {
        "id": invite_id,
        "email": email,
        "portalType": portal_type,
        "status": status,
        "invitedBy": invited_by,
        "sentAt": sent,
        "expiresAt": expires,
        **target,
    }


PORTAL_INVITES = [
    _invite("invite-client-golden-spoon", "owner@goldenspoon.restaurant", "client", "accepted",
            "user-sales-lead", _at(1, 10), _at(1, 17), accountId="account-golden-spoon"),
    _invite("invite-client-techstore", "manager@techstore.com", "client", "accepted",
            "user-sales-rep1", _at(1, 12), _at(1, 19), accountId="account-tech-store"),
    _invite("invite-client-healthfirst", "owner@healthfirst.pharmacy", "client", "accepted",
            "user-sales-lead", _at(2, 1), _at(2, 8), accountId="account-health-first"),
    _invite("invite-client-powergym", "it@powergym.fitness", "client", "pending",
            "user-sales-rep1", _at(3, 20), _at(3, 27), accountId="account-fitness-center"),
    _invite("invite-candidate-001", "mariam.farouk@email.com", "candidate", "accepted",
            "user-hr-recruiter", _at(3, 5), _at(3, 12), candidateId="candidate-mobile-developer-invited"),
    _invite("invite-candidate-002", "heba.mostafa@email.com", "candidate", "accepted",
            "user-hr-recruiter", _at(3, 6), _at(3, 13), candidateId="candidate-hr-coordinator"),
    _invite("invite-candidate-003", "karim.elwakil@email.com", "candidate", "accepted",
            "user-hr-recruiter", _at(3, 1), _at(3, 8), candidateId="candidate-sales-rep-training"),
    _invite("invite-candidate-004", "sara.zaki@email.com", "candidate", "pending",
            "user-hr-recruiter", _at(3, 22), _at(3, 29), candidateId="candidate-accountant-training"),
    _invite("invite-employee-new", "mahmoud.gamal@mas.business", "employee", "pending",
            "user-manager-hr", _at(3, 25), _at(4, 1), candidateId="candidate-data-analyst-hired"),
    _invite("invite-expired-candidate", "youssef.ahmed@email.com", "candidate", "expired",
            "user-hr-recruiter", _at(2, 1), _at(2, 8), candidateId="candidate-junior-developer-1"),
]
