"""Recruitment pipeline data: candidates, interviews and onboarding."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

_CVS = "https://storage.googleapis.com/mashub-assets/cvs"


def _candidate(candidate_id: str, name: str, email: str, phone: str, stage: str,
               position: str, department: str, source: str, expected_salary: int,
               experience: int, skills: list[str], **custom: Any) -> dict[str, Any]:
    return {
        "id": candidate_id,
        "name": name,
        "email": email,
        "phoneNumber": phone,
        "stage": stage,
        "position": position,
        "department": department,
        "source": source,
        "cvUrl": f"{_CVS}/{email.split('@')[0].replace('.', '-')}-cv.pdf",
        "expectedSalary": expected_salary,
        "experience": experience,
        "skills": skills,
        "customFields": custom,
    }


_TECH = "Technology & Development"

CANDIDATES = [
    # Applied / shortlisted
    _candidate("candidate-junior-developer-1", "Youssef Ahmed", "youssef.ahmed@email.com", "+20-10-1111-0001",
               "applied", "Junior Developer", _TECH, "LinkedIn", 7000, 1,
               ["JavaScript", "React", "Node.js"]),
    _candidate("candidate-marketing-specialist-1", "Nour Hassan", "nour.hassan@email.com", "+20-10-1111-0002",
               "applied", "Marketing Specialist", "Marketing & Sales", "Company Website", 8000, 3,
               ["SEO", "Content Marketing", "Social Media"]),
    _candidate("candidate-support-engineer-1", "Ahmed Mahmoud", "ahmed.mahmoud@email.com", "+20-10-1111-0003",
               "shortlist", "Support Engineer", "IT Support & Services", "Referral", 7500, 2,
               ["Windows Server", "Networking", "POS Hardware"], referredBy="user-support-lead"),
    _candidate("candidate-senior-developer", "Layla Abdel-Rahman", "layla.abdel.rahman@email.com",
               "+20-10-1111-0004", "shortlist", "Senior Full-Stack Developer", _TECH, "LinkedIn", 18000, 7,
               ["TypeScript", "React", "Node.js", "Microservices", "AWS"]),
    _candidate("candidate-pos-specialist", "Omar El-Shazly", "omar.elshazly@email.com", "+20-10-1111-0005",
               "shortlist", "POS Implementation Specialist", "POS Systems", "Job Board", 11000, 5,
               ["POS Configuration", "Retail Operations", "Training"]),
    # Invited to the candidate portal
    _candidate("candidate-mobile-developer-invited", "Mariam Farouk", "mariam.farouk@email.com",
               "+20-10-1111-0006", "invited", "Mobile App Developer", _TECH, "LinkedIn", 12000, 4,
               ["Flutter", "Dart", "Firebase"]),
    _candidate("candidate-hr-coordinator", "Heba Mostafa", "heba.mostafa@email.com", "+20-10-1111-0007",
               "invited", "HR Coordinator", "Human Resources", "Referral", 8500, 3,
               ["Recruitment", "Onboarding", "HRIS"]),
    # Pre-hire training
    _candidate("candidate-sales-rep-training", "Karim El-Wakil", "karim.elwakil@email.com", "+20-10-1111-0008",
               "training", "Sales Representative", "Marketing & Sales", "Job Fair", 7000, 2,
               ["B2B Sales", "CRM", "Negotiation"], trainingCourse="course-sales-skills-assessment"),
    _candidate("candidate-accountant-training", "Sara Zaki", "sara.zaki@email.com", "+20-10-1111-0009",
               "training", "Junior Accountant", "Finance & Accounting", "University Partnership", 6500, 1,
               ["Accounting", "Excel", "QuickBooks"]),
    # Interviewing
    _candidate("candidate-project-manager-interview", "Mohamed Hosny", "mohamed.hosny@email.com",
               "+20-10-1111-0010", "interview", "Project Manager", "POS Systems", "LinkedIn", 16000, 8,
               ["PMP", "Agile", "Stakeholder Management"]),
    _candidate("candidate-designer-interview", "Yasmin Nader", "yasmin.nader@email.com", "+20-10-1111-0011",
               "interview", "UI/UX Designer", _TECH, "Behance", 10000, 4,
               ["Figma", "User Research", "Prototyping"], portfolioUrl="https://behance.net/yasminnader"),
    # Offers
    _candidate("candidate-devops-offer", "Ali Rashid", "ali.rashid@email.com", "+20-10-1111-0012",
               "offer", "DevOps Engineer", _TECH, "Referral", 17000, 6,
               ["Kubernetes", "Terraform", "CI/CD", "GCP"], offerAmount=16500),
    _candidate("candidate-finance-manager-offer", "Dina Salama", "dina.salama@email.com", "+20-10-1111-0013",
               "offer", "Finance Manager", "Finance & Accounting", "Headhunter", 22000, 10,
               ["Financial Planning", "IFRS", "Team Leadership"], offerAmount=21000),
    # Hired
    _candidate("candidate-data-analyst-hired", "Mahmoud Gamal", "mahmoud.gamal@email.com", "+20-10-4444-3333",
               "hired", "Data Analyst", _TECH, "University Partnership", 9000, 1,
               ["SQL", "Python", "Data Visualization", "Statistics", "Machine Learning", "Excel"],
               university="Cairo University", degree="Computer Science", startDate="2024-04-01",
               onboardingStatus="Pending"),
    # Rejected
    _candidate("candidate-rejected-experience", "Tamer Ibrahim", "tamer.ibrahim@email.com", "+20-10-1111-0015",
               "rejected", "Senior Full-Stack Developer", _TECH, "Job Board", 20000, 2,
               ["PHP", "jQuery"], rejectionReason="Insufficient experience for senior role"),
]


def _interview(interview_id: str, candidate_id: str, interview_type: str, status: str,
               scheduled: datetime, interviewers: list[str], duration: int = 60,
               **outcome: Any) -> dict[str, Any]:
    return {
        "id": interview_id,
        "candidateId": candidate_id,
        "type": interview_type,
        "status": status,
        "scheduledAt": scheduled,
        "duration": duration,
        "interviewers": interviewers,
        **outcome,
    }


def _at(month: int, day: int, hour: int) -> datetime:
    return datetime(2024, month, day, hour, tzinfo=timezone.utc)


INTERVIEWS = [
    _interview("interview-layla-technical", "candidate-senior-developer", "technical", "completed",
               _at(3, 15, 10), ["user-manager-tech", "user-senior-developer"], 90,
               result="pass", rating=5, location="Conference Room A"),
    _interview("interview-omar-pos-specialist", "candidate-pos-specialist", "technical", "completed",
               _at(3, 18, 14), ["user-manager-pos", "user-pos-analyst"],
               result="pass", rating=4, location="POS Demo Room"),
    _interview("interview-mohamed-pm-final", "candidate-project-manager-interview", "final", "completed",
               _at(3, 20, 11), ["user-ceo", "user-manager-pos"],
               result="pass", rating=4, location="CEO Office"),
    _interview("interview-ali-devops-technical", "candidate-devops-offer", "technical", "completed",
               _at(3, 12, 13), ["user-manager-tech", "user-senior-developer"], 120,
               result="pass", rating=5, location="Online"),
    _interview("interview-yasmin-designer-portfolio", "candidate-designer-interview", "technical", "scheduled",
               _at(3, 26, 10), ["user-manager-tech", "user-frontend-developer"], location="Conference Room B"),
    _interview("interview-mariam-mobile-assessment", "candidate-mobile-developer-invited", "technical",
               "scheduled", _at(3, 27, 12), ["user-mobile-developer"], 90, location="Online"),
    _interview("interview-heba-hr-competency", "candidate-hr-coordinator", "hr", "scheduled",
               _at(3, 28, 10), ["user-manager-hr", "user-hr-recruiter"], 45, location="HR Office"),
]


def _step(title: str, category: str, days_from_start: int, assignee_role: str | None = None,
          required: bool = True) -> dict[str, Any]:
    step: dict[str, Any] = {
        "title": title,
        "category": category,
        "daysFromStart": days_from_start,
        "required": required,
    }
    if assignee_role:
        step["assigneeRole"] = assignee_role
    return step


ONBOARDING_TEMPLATES = [
    {
        "id": "template-developer-onboarding",
        "name": "Developer Onboarding",
        "department": _TECH,
        "tasks": [
            _step("IT Equipment Setup", "equipment", 0, "IT Support"),
            _step("Company Orientation Training", "training", 1),
            _step("Development Environment Setup", "access", 1, "Senior Developer"),
            _step("Meet the Team", "meeting", 2),
            _step("First Code Review", "training", 10, "Senior Developer", required=False),
        ],
        "active": True,
    },
    {
        "id": "template-sales-onboarding",
        "name": "Sales Representative Onboarding",
        "department": "Marketing & Sales",
        "tasks": [
            _step("CRM Account Setup", "access", 0, "IT Support"),
            _step("Product Catalogue Training", "training", 2),
            _step("Shadow Senior Sales Executive", "meeting", 5, "Sales Lead"),
        ],
        "active": True,
    },
    {
        "id": "template-support-onboarding",
        "name": "Support Engineer Onboarding",
        "department": "IT Support & Services",
        "tasks": [
            _step("Helpdesk Access", "access", 0, "IT Support"),
            _step("POS Troubleshooting Course", "training", 3),
            _step("First Field Visit With Mentor", "meeting", 7, "Support Lead"),
        ],
        "active": True,
    },
]


def _onboarding(task_id: str, title: str, category: str, day: int,
                assignee: str | None = None) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": task_id,
        # The hired candidate keeps the candidate id until an account is provisioned.
        "userId": "candidate-data-analyst-hired",
        "templateId": "template-developer-onboarding",
        "title": title,
        "category": category,
        "dueDate": datetime(2024, 4, day, tzinfo=timezone.utc),
        "status": "pending",
    }
    if assignee:
        record["assigneeId"] = assignee
    return record


ONBOARDING_TASKS = [
    _onboarding("task-mahmoud-equipment", "IT Equipment Setup", "equipment", 1, "user-support-tech"),
    _onboarding("task-mahmoud-orientation", "Company Orientation Training", "training", 2),
    _onboarding("task-mahmoud-dev-environment", "Development Environment Setup", "access", 2,
                "user-senior-developer"),
    _onboarding("task-mahmoud-team-meeting", "Meet the Team", "meeting", 3),
]
