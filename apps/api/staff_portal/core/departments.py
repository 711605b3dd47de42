SUB_DEPARTMENTS: dict[str, list[str]] = {
    "HR": ["Recruitment", "Training", "Employee Relations"],
    "Staff Management": ["Performance", "Scheduling", "Operations"],
    "Internal Affairs": ["Compliance", "Investigations", "Quality Assurance"],
    "Professional Development": ["Learning", "Mentorship", "Career Growth"],
    "PR": ["Communications", "Media Relations", "Brand"],
    "Engagement and Marketing": ["Community", "Events", "Campaigns"],
    "Socials": ["Content Creation", "Social Media", "Graphics"],
    "Affiliates": ["Partnerships", "Relations", "Outreach"],
}

DEPARTMENTS: list[str] = list(SUB_DEPARTMENTS)

# Newly verified accounts land here until they request a transfer.
DEFAULT_DEPARTMENT = "HR"
DEFAULT_SUB_DEPARTMENT = "Recruitment"
