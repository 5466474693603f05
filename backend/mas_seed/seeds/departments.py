"""Department seed records (one per business unit)."""

DEPARTMENTS = [
    {"id": "dept-pos", "name": "POS Systems", "code": "POS", "managerId": "user-manager-pos", "active": True},
    {"id": "dept-tech", "name": "Technology & Development", "code": "TECH", "managerId": "user-manager-tech", "active": True},
    {"id": "dept-support", "name": "IT Support & Services", "code": "SUPPORT", "managerId": "user-manager-support", "active": True},
    {"id": "dept-marketing", "name": "Marketing & Sales", "code": "MKT", "managerId": "user-manager-marketing", "active": True},
    {"id": "dept-finance", "name": "Finance & Accounting", "code": "FIN", "managerId": "user-manager-finance", "active": True},
    {"id": "dept-hr", "name": "Human Resources", "code": "HR", "managerId": "user-manager-hr", "active": True},
]
