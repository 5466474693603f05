"""Project types, templates, projects, phases and tasks."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def _d(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


PROJECT_TYPES = [
    {"id": "project-type-pos", "name": "POS System Implementation", "code": "POS", "defaultDuration": 90, "active": True},
    {"id": "project-type-mobile", "name": "Mobile Application Development", "code": "MOBILE", "defaultDuration": 120, "active": True},
    {"id": "project-type-hybrid", "name": "Hybrid Solution (POS + Mobile)", "code": "HYBRID", "defaultDuration": 150, "active": True},
    {"id": "project-type-support", "name": "IT Support Contract", "code": "SUPPORT", "defaultDuration": 365, "active": True},
    {"id": "project-type-training", "name": "Staff Training Program", "code": "TRAINING", "defaultDuration": 30, "active": True},
]


def _phase_template(name: str, duration: int, weight: int, *tasks: tuple[str, int]) -> dict[str, Any]:
    return {
        "name": name,
        "duration": duration,
        "weight": weight,
        "defaultTasks": [{"title": title, "estimateHours": hours} for title, hours in tasks],
    }


PROJECT_TEMPLATES = [
    {
        "id": "template-pos-standard",
        "name": "Standard POS Implementation",
        "projectTypeId": "project-type-pos",
        "phases": [
            _phase_template("Discovery & Analysis", 14, 15,
                            ("Requirements Gathering", 16), ("Site Survey", 8), ("Technical Specification", 12)),
            _phase_template("System Configuration", 21, 30,
                            ("Hardware Installation", 24), ("Software Configuration", 32)),
            _phase_template("Data Migration", 14, 20,
                            ("Data Extraction", 12), ("Data Import & Validation", 16)),
            _phase_template("Training", 7, 15, ("Staff Training Sessions", 16)),
            _phase_template("Go-Live & Support", 14, 20, ("Go-Live Support", 40)),
        ],
        "active": True,
    },
    {
        "id": "template-mobile-app",
        "name": "Mobile App Development",
        "projectTypeId": "project-type-mobile",
        "phases": [
            _phase_template("UX Research & Design", 21, 20, ("User Research", 24), ("UI Design", 60)),
            _phase_template("Development", 56, 50, ("Core Features", 240), ("Payment Integration", 40)),
            _phase_template("Testing & Release", 21, 30, ("QA Testing", 80), ("Store Submission", 16)),
        ],
        "active": True,
    },
]


def _project(project_id: str, name: str, code: str, account_id: str, type_id: str,
             manager_id: str, status: str, start: datetime, due: datetime,
             budget: int, completion: int, members: list[str], tags: list[str]) -> dict[str, Any]:
    return {
        "id": project_id,
        "name": name,
        "code": code,
        "accountId": account_id,
        "projectTypeId": type_id,
        "managerId": manager_id,
        "status": status,
        "startDate": start,
        "dueDate": due,
        "estimateBudget": budget,
        "currency": "USD",
        "completionPercentage": completion,
        "members": members,
        "tags": tags,
    }


PROJECTS = [
    _project("project-golden-spoon-pos", "Golden Spoon Restaurant POS System", "GS-POS-2024-001",
             "account-golden-spoon", "project-type-pos", "user-pos-analyst", "in_progress",
             _d(2024, 1, 15), _d(2024, 4, 15), 45000, 65,
             ["user-pos-analyst", "user-pos-developer", "user-support-tech"],
             ["restaurant", "multi-location", "inventory"]),
    _project("project-pizza-palace-expansion", "Pizza Palace Chain Expansion", "PP-HYBRID-2024-002",
             "account-pizza-palace", "project-type-hybrid", "user-senior-developer", "planning",
             _d(2024, 4, 1), _d(2024, 9, 1), 125000, 5,
             ["user-senior-developer", "user-mobile-developer", "user-pos-developer"],
             ["restaurant", "mobile-ordering", "chain"]),
    _project("project-health-first-pos", "HealthFirst Pharmacy POS", "HF-POS-2024-003",
             "account-health-first", "project-type-pos", "user-pos-analyst", "in_progress",
             _d(2024, 2, 1), _d(2024, 5, 1), 38000, 40,
             ["user-pos-analyst", "user-pos-developer"], ["pharmacy", "inventory"]),
    _project("project-techstore-mobile", "TechStore Mobile Shopping App", "TS-MOB-2024-004",
             "account-tech-store", "project-type-mobile", "user-senior-developer", "in_progress",
             _d(2024, 1, 8), _d(2024, 5, 8), 60000, 55,
             ["user-senior-developer", "user-mobile-developer", "user-frontend-developer"],
             ["retail", "e-commerce"]),
    _project("project-dental-support", "Smile Dental IT Support 2024", "SD-SUP-2024-005",
             "account-dental-clinic", "project-type-support", "user-support-lead", "in_progress",
             _d(2024, 1, 1), _d(2024, 12, 31), 24000, 25,
             ["user-support-lead", "user-support-tech"], ["support", "recurring"]),
    _project("project-beauty-salon-pos", "Glamour Salon Booking & POS", "GB-POS-2023-006",
             "account-beauty-salon", "project-type-pos", "user-pos-analyst", "completed",
             _d(2023, 9, 1), _d(2023, 12, 15), 18000, 100,
             ["user-pos-analyst", "user-pos-developer"], ["beauty", "booking"]),
]


def _phase(phase_id: str, name: str, order: int, weight: int, status: str, completion: int,
           start: datetime, due: datetime) -> dict[str, Any]:
    return {
        "id": phase_id,
        "projectId": "project-golden-spoon-pos",
        "name": name,
        "startDate": start,
        "dueDate": due,
        "weight": weight,
        "status": status,
        "completionPercentage": completion,
        "order": order,
    }


PHASES = [
    _phase("phase-gs-discovery", "Discovery & Analysis", 1, 15, "completed", 100, _d(2024, 1, 15), _d(2024, 1, 29)),
    _phase("phase-gs-config", "System Configuration", 2, 30, "completed", 100, _d(2024, 1, 29), _d(2024, 2, 19)),
    _phase("phase-gs-migration", "Data Migration", 3, 20, "in_progress", 60, _d(2024, 2, 19), _d(2024, 3, 4)),
    _phase("phase-gs-training", "Training", 4, 15, "planning", 0, _d(2024, 3, 4), _d(2024, 3, 11)),
    _phase("phase-gs-golive", "Go-Live & Support", 5, 20, "planning", 0, _d(2024, 3, 11), _d(2024, 4, 15)),
]


def _task(task_id: str, project_id: str, title: str, status: str, assignee: str,
          due: datetime, estimate: int, spent: int, phase_id: str | None = None,
          priority: int = 2) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": task_id,
        "projectId": project_id,
        "title": title,
        "status": status,
        "priority": priority,
        "assigneeId": assignee,
        "dueDate": due,
        "estimateHours": estimate,
        "spentHours": spent,
        "remainingHours": max(estimate - spent, 0) if status != "completed" else 0,
    }
    if phase_id:
        record["phaseId"] = phase_id
    return record


TASKS = [
    _task("task-gs-data-extraction", "project-golden-spoon-pos", "Extract Menu Data from Existing System",
          "completed", "user-pos-developer", _d(2024, 2, 23), 12, 10, "phase-gs-migration", priority=3),
    _task("task-gs-data-transform", "project-golden-spoon-pos", "Transform Customer Data Format",
          "in_progress", "user-pos-developer", _d(2024, 2, 28), 16, 9, "phase-gs-migration", priority=3),
    _task("task-gs-inventory-import", "project-golden-spoon-pos", "Import Inventory Items",
          "todo", "user-pos-analyst", _d(2024, 3, 2), 10, 0, "phase-gs-migration"),
    _task("task-ts-payment-integration", "project-techstore-mobile", "Integrate Payment Gateway",
          "in_progress", "user-mobile-developer", _d(2024, 3, 30), 40, 22, priority=4),
    _task("task-ts-push-notifications", "project-techstore-mobile", "Implement Push Notifications",
          "review", "user-frontend-developer", _d(2024, 3, 25), 20, 18),
    _task("task-dental-monthly-maintenance", "project-dental-support", "Monthly System Maintenance",
          "todo", "user-support-tech", _d(2024, 4, 5), 4, 0),
]
