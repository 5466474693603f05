"""System role seed records with their permission grants."""

from __future__ import annotations

from typing import Any

_CRU = ["create", "read", "update"]
_RU = ["read", "update"]
_R = ["read"]


def _perm(resource: str, actions: list[str], scope: str) -> dict[str, Any]:
    return {"resource": resource, "actions": list(actions), "scope": scope}


ROLES = [
    {
        "id": "role-admin",
        "name": "System Administrator",
        "description": "Full system access and configuration rights",
        "permissions": [_perm("*", ["create", "read", "update", "delete"], "all")],
        "isSystem": True,
    },
    {
        "id": "role-ceo",
        "name": "CEO/Executive",
        "description": "Executive dashboard and company-wide reporting",
        "permissions": [
            _perm("projects", _R, "all"),
            _perm("accounts", _R, "all"),
            _perm("invoices", _R, "all"),
            _perm("reports", _R, "all"),
            _perm("analytics", _R, "all"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-department-manager",
        "name": "Department Manager",
        "description": "Manage department resources and approve timesheets",
        "permissions": [
            _perm("projects", _CRU, "department"),
            _perm("tasks", _CRU, "department"),
            _perm("timesheets", _RU, "department"),
            _perm("users", _R, "department"),
            _perm("reports", _R, "department"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-project-manager",
        "name": "Project Manager",
        "description": "Manage assigned projects and teams",
        "permissions": [
            _perm("projects", _RU, "own"),
            _perm("tasks", _CRU, "own"),
            _perm("timesheets", _RU, "own"),
            _perm("phases", _CRU, "own"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-employee",
        "name": "Employee",
        "description": "Standard employee portal access",
        "permissions": [
            _perm("tasks", _RU, "own"),
            _perm("timesheets", _CRU, "own"),
            _perm("projects", _R, "own"),
            _perm("training", _RU, "own"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-sales-rep",
        "name": "Sales Representative",
        "description": "CRM and sales pipeline management",
        "permissions": [
            _perm("opportunities", _CRU, "own"),
            _perm("accounts", _CRU, "own"),
            _perm("quotes", _CRU, "own"),
            _perm("contracts", _R, "own"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-finance-manager",
        "name": "Finance Manager",
        "description": "Financial operations and billing management",
        "permissions": [
            _perm("invoices", _CRU, "all"),
            _perm("payments", _CRU, "all"),
            _perm("transactions", _CRU, "all"),
            _perm("contracts", _CRU, "all"),
            _perm("reports", _R, "all"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-support-agent",
        "name": "Support Agent",
        "description": "Handle support tickets and client issues",
        "permissions": [
            _perm("tickets", _CRU, "own"),
            _perm("accounts", _R, "all"),
            _perm("assets", _R, "all"),
            _perm("visits", _CRU, "own"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-hr-manager",
        "name": "HR Manager",
        "description": "Human resources and recruitment management",
        "permissions": [
            _perm("candidates", _CRU, "all"),
            _perm("interviews", _CRU, "all"),
            _perm("users", _CRU, "all"),
            _perm("training", _CRU, "all"),
        ],
        "isSystem": True,
    },
    {
        "id": "role-client",
        "name": "Client Portal User",
        "description": "Access to client portal features",
        "permissions": [
            _perm("projects", _R, "own"),
            _perm("invoices", _R, "own"),
            _perm("tickets", ["create", "read"], "own"),
            _perm("training", _R, "own"),
        ],
        "isSystem": True,
    },
]
