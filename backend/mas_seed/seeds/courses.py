"""Learning management data: courses, lessons, quizzes and training assignments."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

_THUMBS = "https://storage.googleapis.com/mashub-assets/courses"


def _d(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _course(course_id: str, title: str, audience: str, duration: int, passing_score: int,
            tags: list[str], thumbnail: str) -> dict[str, Any]:
    return {
        "id": course_id,
        "title": title,
        "audience": audience,
        "duration": duration,
        "thumbnail": f"{_THUMBS}/{thumbnail}.jpg",
        "passingScore": passing_score,
        "tags": tags,
        "active": True,
    }


COURSES = [
    # Employees
    _course("course-new-employee-orientation", "New Employee Orientation", "employee", 8, 80,
            ["orientation", "onboarding", "company-culture"], "orientation"),
    _course("course-pos-system-basics", "POS System Fundamentals", "employee", 4, 85,
            ["pos", "technical", "basics"], "pos-basics"),
    _course("course-customer-service-excellence", "Customer Service Excellence", "employee", 6, 75,
            ["customer-service", "communication", "soft-skills"], "customer-service"),
    _course("course-project-management", "Project Management Essentials", "employee", 12, 80,
            ["management", "leadership", "planning"], "project-management"),
    # Candidates
    _course("course-pre-hire-technical-assessment", "Technical Skills Assessment", "candidate", 3, 70,
            ["assessment", "technical", "programming"], "technical-assessment"),
    _course("course-company-overview", "MAS Company Overview", "candidate", 1, 60,
            ["company", "overview"], "company-overview"),
    _course("course-sales-skills-assessment", "Sales Skills Assessment", "candidate", 2, 70,
            ["assessment", "sales"], "sales-assessment"),
    # Clients
    _course("course-restaurant-pos-training", "Restaurant POS Training", "client", 5, 75,
            ["pos", "restaurant", "client-training"], "restaurant-pos"),
    _course("course-retail-pos-training", "Retail POS Training", "client", 4, 75,
            ["pos", "retail", "client-training"], "retail-pos"),
    _course("course-pharmacy-pos-training", "Pharmacy POS Training", "client", 5, 80,
            ["pos", "pharmacy", "client-training"], "pharmacy-pos"),
    _course("course-mobile-app-user-guide", "Mobile App User Guide", "client", 2, 60,
            ["mobile", "client-training"], "mobile-guide"),
    _course("course-data-security-awareness", "Data Security Awareness", "employee", 2, 90,
            ["security", "compliance"], "security"),
    _course("course-system-troubleshooting", "System Troubleshooting", "client", 3, 70,
            ["support", "troubleshooting"], "troubleshooting"),
]


def _lesson(lesson_id: str, course_id: str, title: str, order: int, minutes: int,
            content_type: str = "video") -> dict[str, Any]:
    return {
        "id": lesson_id,
        "courseId": course_id,
        "title": title,
        "order": order,
        "durationMinutes": minutes,
        "contentType": content_type,
    }


LESSONS = [
    _lesson("lesson-orientation-welcome", "course-new-employee-orientation", "Welcome to MAS", 1, 30),
    _lesson("lesson-orientation-policies", "course-new-employee-orientation", "Company Policies", 2, 60, "document"),
    _lesson("lesson-orientation-culture", "course-new-employee-orientation", "Our Culture and Values", 3, 45),
    _lesson("lesson-pos-navigation", "course-pos-system-basics", "Navigating the POS", 1, 40),
    _lesson("lesson-pos-transactions", "course-pos-system-basics", "Processing Transactions", 2, 60),
    _lesson("lesson-pos-reports", "course-pos-system-basics", "Daily Reports", 3, 45),
    _lesson("lesson-restaurant-setup", "course-restaurant-pos-training", "Restaurant Setup", 1, 60),
    _lesson("lesson-menu-management", "course-restaurant-pos-training", "Menu Management", 2, 75),
    _lesson("lesson-order-processing", "course-restaurant-pos-training", "Order Processing", 3, 90),
    _lesson("lesson-tech-programming-fundamentals", "course-pre-hire-technical-assessment",
            "Programming Fundamentals", 1, 60, "exercise"),
    _lesson("lesson-tech-problem-solving", "course-pre-hire-technical-assessment",
            "Problem Solving", 2, 90, "exercise"),
]


def _question(question_id: str, text: str, question_type: str, answer: Any, points: int,
              options: list[str] | None = None) -> dict[str, Any]:
    question: dict[str, Any] = {
        "id": question_id,
        "text": text,
        "type": question_type,
        "correctAnswer": answer,
        "points": points,
    }
    if options:
        question["options"] = options
    return question


QUIZZES = [
    {
        "id": "quiz-orientation-final",
        "courseId": "course-new-employee-orientation",
        "title": "New Employee Orientation Final Assessment",
        "timeLimit": 30,
        "attempts": 3,
        "randomizeQuestions": True,
        "questions": [
            _question("q1", "What are the core values of MAS Business Solutions?", "multiple_choice",
                      "Innovation, Excellence, Customer-First", 10,
                      ["Innovation, Excellence, Customer-First", "Profit, Growth, Expansion",
                       "Speed, Efficiency, Cost-Cutting", "Technology, Sales, Marketing"]),
            _question("q2", "How many days of annual leave are new employees entitled to?", "single_choice",
                      "25 days", 5, ["15 days", "20 days", "25 days", "30 days"]),
            _question("q3", "Is it acceptable to share client data with external parties without authorization?",
                      "true_false", False, 15),
        ],
    },
    {
        "id": "quiz-pos-basics-final",
        "courseId": "course-pos-system-basics",
        "title": "POS System Basics Assessment",
        "timeLimit": 20,
        "attempts": 2,
        "randomizeQuestions": False,
        "questions": [
            _question("q1", "Which report shows the cash drawer balance at close?", "single_choice",
                      "Z Report", 10, ["X Report", "Z Report", "Sales Summary"]),
            _question("q2", "A voided sale still appears in the transaction log.", "true_false", True, 5),
        ],
    },
    {
        "id": "quiz-restaurant-pos-module1",
        "courseId": "course-restaurant-pos-training",
        "lessonId": "lesson-menu-management",
        "title": "Menu Management Check",
        "timeLimit": 15,
        "attempts": 3,
        "randomizeQuestions": False,
        "questions": [
            _question("q1", "Where do you mark an item as out of stock?", "single_choice",
                      "Menu > Items > Availability", 10,
                      ["Settings > Printers", "Menu > Items > Availability", "Reports > Inventory"]),
            _question("q2", "Modifiers can carry their own price.", "true_false", True, 5),
        ],
    },
]


def _assignment(assignment_id: str, course_id: str, status: str, due: datetime, progress: int,
                *, user_id: str | None = None, account_id: str | None = None,
                candidate_id: str | None = None, assigned_by: str = "user-manager-hr") -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": assignment_id,
        "courseId": course_id,
        "assignedBy": assigned_by,
        "dueDate": due,
        "status": status,
        "progressPct": progress,
    }
    if user_id:
        record["userId"] = user_id
    if account_id:
        record["accountId"] = account_id
    if candidate_id:
        record["candidateId"] = candidate_id
    return record


ASSIGNMENTS = [
    _assignment("assignment-new-dev-orientation", "course-new-employee-orientation", "in_progress",
                _d(2024, 4, 1), 60, user_id="user-frontend-developer"),
    _assignment("assignment-pos-training-analyst", "course-pos-system-basics", "completed",
                _d(2024, 3, 15), 100, user_id="user-pos-analyst", assigned_by="user-manager-pos"),
    _assignment("assignment-customer-service-support", "course-customer-service-excellence", "assigned",
                _d(2024, 4, 15), 0, user_id="user-support-tech", assigned_by="user-manager-support"),
    _assignment("assignment-tech-assessment-candidate1", "course-pre-hire-technical-assessment", "completed",
                _d(2024, 3, 10), 100, candidate_id="candidate-senior-developer"),
    _assignment("assignment-company-overview-candidate2", "course-company-overview", "in_progress",
                _d(2024, 3, 30), 50, candidate_id="candidate-sales-rep-training"),
    _assignment("assignment-restaurant-training-golden-spoon", "course-restaurant-pos-training", "in_progress",
                _d(2024, 3, 31), 40, user_id="user-client-restaurant-owner", account_id="account-golden-spoon",
                assigned_by="user-pos-analyst"),
    _assignment("assignment-retail-training-techstore", "course-retail-pos-training", "assigned",
                _d(2024, 4, 20), 0, user_id="user-client-retail-manager", account_id="account-tech-store",
                assigned_by="user-pos-analyst"),
    _assignment("assignment-pharmacy-training-healthfirst", "course-pharmacy-pos-training", "overdue",
                _d(2024, 3, 1), 20, user_id="user-client-pharmacy-owner", account_id="account-health-first",
                assigned_by="user-pos-analyst"),
    _assignment("assignment-security-all-employees-1", "course-data-security-awareness", "assigned",
                _d(2024, 4, 30), 0, user_id="user-accountant"),
    _assignment("assignment-security-client-golden-spoon", "course-system-troubleshooting", "assigned",
                _d(2024, 4, 30), 0, account_id="account-golden-spoon", assigned_by="user-support-lead"),
]
