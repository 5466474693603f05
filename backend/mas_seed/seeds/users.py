"""Staff and client-portal users plus their role assignments."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

_AVATARS = "https://storage.googleapis.com/mashub-assets/avatars"


def _user(
    user_id: str,
    email: str,
    name: str,
    title: str,
    *,
    department_id: str | None = None,
    employee_no: int | None = None,
    start: tuple[int, int, int] | None = None,
    client_accounts: list[str] | None = None,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": user_id,
        "email": email,
        "name": name,
        "photoUrl": f"{_AVATARS}/{user_id.removeprefix('user-')}.jpg",
        "active": True,
        "title": title,
        "timezone": "Africa/Cairo",
        "language": "en",
        "portalAccess": {
            "employee": employee_no is not None,
            "client": list(client_accounts or []),
        },
    }
    if department_id:
        record["departmentId"] = department_id
    if employee_no is not None:
        record["employeeId"] = f"EMP-{employee_no:03d}"
    if start:
        record["startDate"] = datetime(*start, tzinfo=timezone.utc)
    return record


USERS = [
    # Executive team and department managers
    _user("user-ceo", "ceo@mas.business", "Ahmed El-Masry", "Chief Executive Officer",
          employee_no=1, start=(2020, 1, 1)),
    _user("user-manager-pos", "pos.manager@mas.business", "Sarah Ahmed", "POS Systems Manager",
          department_id="dept-pos", employee_no=2, start=(2020, 3, 15)),
    _user("user-manager-tech", "tech.manager@mas.business", "Omar Hassan", "Technology Director",
          department_id="dept-tech", employee_no=3, start=(2020, 2, 1)),
    _user("user-manager-support", "support.manager@mas.business", "Maha Farouk", "Support Services Manager",
          department_id="dept-support", employee_no=4, start=(2020, 4, 1)),
    _user("user-manager-marketing", "marketing.manager@mas.business", "Yasmin Nour", "Marketing & Sales Director",
          department_id="dept-marketing", employee_no=5, start=(2020, 5, 10)),
    _user("user-manager-finance", "finance.manager@mas.business", "Karim Mostafa", "Finance Manager",
          department_id="dept-finance", employee_no=6, start=(2020, 1, 20)),
    _user("user-manager-hr", "hr.manager@mas.business", "Nadia Rashid", "HR Manager",
          department_id="dept-hr", employee_no=7, start=(2020, 2, 15)),
    # Staff
    _user("user-pos-analyst", "pos.analyst@mas.business", "Mohamed Saeed", "POS Systems Analyst",
          department_id="dept-pos", employee_no=8, start=(2021, 3, 1)),
    _user("user-pos-developer", "pos.developer@mas.business", "Amira Soliman", "POS Developer",
          department_id="dept-pos", employee_no=9, start=(2021, 6, 15)),
    _user("user-senior-developer", "senior.dev@mas.business", "Hossam Abdel-Rahman", "Senior Full-Stack Developer",
          department_id="dept-tech", employee_no=10, start=(2020, 9, 1)),
    _user("user-frontend-developer", "frontend.dev@mas.business", "Lina Mahmoud", "Frontend Developer",
          department_id="dept-tech", employee_no=11, start=(2024, 3, 18)),
    _user("user-mobile-developer", "mobile.dev@mas.business", "Tarek Zaki", "Mobile App Developer",
          department_id="dept-tech", employee_no=12, start=(2022, 1, 10)),
    _user("user-support-lead", "support.lead@mas.business", "Fatma El-Sayed", "Senior Support Specialist",
          department_id="dept-support", employee_no=13, start=(2020, 11, 1)),
    _user("user-support-tech", "support.tech@mas.business", "Ahmed Farid", "Technical Support Engineer",
          department_id="dept-support", employee_no=14, start=(2022, 4, 1)),
    _user("user-field-engineer", "field.engineer@mas.business", "Mahmoud Gaber", "Field Support Engineer",
          department_id="dept-support", employee_no=15, start=(2021, 8, 15)),
    _user("user-sales-lead", "sales.lead@mas.business", "Rania Othman", "Senior Sales Executive",
          department_id="dept-marketing", employee_no=16, start=(2020, 7, 1)),
    _user("user-sales-rep1", "sales.rep1@mas.business", "Khaled Hosny", "Sales Representative",
          department_id="dept-marketing", employee_no=17, start=(2023, 2, 1)),
    _user("user-marketing-specialist", "marketing.specialist@mas.business", "Dina Youssef",
          "Digital Marketing Specialist", department_id="dept-marketing", employee_no=18, start=(2022, 9, 1)),
    _user("user-accountant", "accountant@mas.business", "Mariam Taha", "Senior Accountant",
          department_id="dept-finance", employee_no=19, start=(2021, 1, 10)),
    _user("user-billing-specialist", "billing@mas.business", "Sherif Mansour", "Billing Specialist",
          department_id="dept-finance", employee_no=20, start=(2022, 6, 1)),
    _user("user-hr-recruiter", "recruiter@mas.business", "Eman Adel", "HR Recruiter",
          department_id="dept-hr", employee_no=21, start=(2021, 10, 1)),
    # Client portal users
    _user("user-client-restaurant-owner", "owner@goldenspoon.restaurant", "Hassan Al-Rashid",
          "Restaurant Owner", client_accounts=["account-golden-spoon"]),
    _user("user-client-retail-manager", "manager@techstore.com", "Layla Mansour",
          "Store Manager", client_accounts=["account-tech-store"]),
    _user("user-client-pharmacy-owner", "owner@healthfirst.pharmacy", "Dr. Amr Khalil",
          "Pharmacy Owner", client_accounts=["account-health-first"]),
]

_ROLE_ASSIGNMENTS = [
    ("user-ceo", "role-ceo"),
    ("user-manager-pos", "role-department-manager"),
    ("user-manager-tech", "role-department-manager"),
    ("user-manager-support", "role-department-manager"),
    ("user-manager-marketing", "role-department-manager"),
    ("user-manager-finance", "role-finance-manager"),
    ("user-manager-hr", "role-hr-manager"),
    ("user-pos-analyst", "role-project-manager"),
    ("user-pos-developer", "role-employee"),
    ("user-senior-developer", "role-project-manager"),
    ("user-frontend-developer", "role-employee"),
    ("user-mobile-developer", "role-employee"),
    ("user-support-lead", "role-support-agent"),
    ("user-support-tech", "role-support-agent"),
    ("user-field-engineer", "role-support-agent"),
    ("user-sales-lead", "role-sales-rep"),
    ("user-sales-rep1", "role-sales-rep"),
    ("user-marketing-specialist", "role-employee"),
    ("user-accountant", "role-employee"),
    ("user-billing-specialist", "role-employee"),
    ("user-hr-recruiter", "role-employee"),
    ("user-client-restaurant-owner", "role-client"),
    ("user-client-retail-manager", "role-client"),
    ("user-client-pharmacy-owner", "role-client"),
]

# Composite key so each assignment has a stable document key.
USER_ROLES = [
    {"id": f"{user_id}_{role_id}", "userId": user_id, "roleId": role_id}
    for user_id, role_id in _ROLE_ASSIGNMENTS
]
