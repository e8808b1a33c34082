from __future__ import annotations

from types import MappingProxyType

ROLE_KEYWORDS = MappingProxyType(
    {
        "development": (
            "developer", "software", "engineer", "programming", "code", "javascript", "python",
            "java", "react", "backend", "frontend", "api",
        ),
        "design": (
            "design", "designer", "ui", "ux", "figma", "photoshop", "illustrator", "graphic",
            "visual", "prototype",
        ),
        "data": (
            "data", "analytics", "sql", "statistics", "machine learning", "tableau", "excel",
            "database", "analysis", "modeling",
        ),
        "management": (
            "manager", "management", "lead", "leadership", "strategy", "stakeholder", "budget",
            "team", "operations", "project",
        ),
        "marketing": (
            "marketing", "seo", "campaign", "brand", "social media", "content", "advertising",
            "market research",
        ),
        "finance": (
            "finance", "financial", "accounting", "audit", "investment", "banking", "tax",
            "forecast", "portfolio",
        ),
        "healthcare": (
            "patient", "clinical", "medical", "healthcare", "nurse", "hospital", "treatment",
            "health",
        ),
        "education": (
            "teacher", "teaching", "curriculum", "student", "classroom", "education", "tutoring",
            "lesson",
        ),
        "customer-service": (
            "customer", "support", "service", "client", "helpdesk", "ticket", "satisfaction",
        ),
        "administrative": (
            "administrative", "office", "scheduling", "data entry", "clerical", "reception",
            "filing", "calendar",
        ),
    }
)

JOB_TITLES = MappingProxyType(
    {
        "development": {
            "entry": ("Junior Software Developer", "Junior Web Developer", "QA Tester"),
            "mid": ("Software Engineer", "Frontend Developer", "Backend Developer", "QA Engineer"),
            "senior": ("Senior Software Engineer", "Technical Lead", "DevOps Engineer", "Software Architect"),
        },
        "design": {
            "entry": ("Junior Graphic Designer", "Design Assistant", "Production Artist"),
            "mid": ("UI/UX Designer", "Product Designer", "Visual Designer"),
            "senior": ("Senior Product Designer", "Design Lead", "Creative Director"),
        },
        "data": {
            "entry": ("Junior Data Analyst", "Reporting Analyst", "Data Technician"),
            "mid": ("Data Analyst", "Business Intelligence Analyst", "Data Engineer"),
            "senior": ("Senior Data Scientist", "Analytics Manager", "Lead Data Engineer"),
        },
        "management": {
            "entry": ("Project Coordinator", "Operations Assistant", "Team Coordinator"),
            "mid": ("Project Manager", "Operations Manager", "Program Coordinator"),
            "senior": ("Senior Project Manager", "Director of Operations", "Program Manager"),
        },
        "marketing": {
            "entry": ("Marketing Assistant", "Social Media Coordinator", "Content Writer"),
            "mid": ("Marketing Specialist", "SEO Specialist", "Content Marketing Manager"),
            "senior": ("Marketing Manager", "Head of Growth", "Brand Director"),
        },
        "finance": {
            "entry": ("Accounting Clerk", "Junior Financial Analyst", "Accounts Payable Specialist"),
            "mid": ("Financial Analyst", "Staff Accountant", "Auditor"),
            "senior": ("Finance Manager", "Senior Financial Analyst", "Controller"),
        },
        "healthcare": {
            "entry": ("Medical Assistant", "Patient Care Technician", "Health Unit Coordinator"),
            "mid": ("Registered Nurse", "Clinical Specialist", "Healthcare Administrator"),
            "senior": ("Nurse Manager", "Clinical Director", "Healthcare Operations Manager"),
        },
        "education": {
            "entry": ("Teaching Assistant", "Tutor", "Substitute Teacher"),
            "mid": ("Teacher", "Curriculum Developer", "Instructional Designer"),
            "senior": ("Department Head", "Curriculum Director", "Academic Program Manager"),
        },
        "customer-service": {
            "entry": ("Customer Service Representative", "Help Desk Technician", "Call Center Agent"),
            "mid": ("Customer Success Specialist", "Technical Support Specialist", "Client Services Coordinator"),
            "senior": ("Customer Success Manager", "Support Team Lead", "Client Relations Manager"),
        },
        "administrative": {
            "entry": ("Administrative Assistant", "Receptionist", "Data Entry Clerk"),
            "mid": ("Office Coordinator", "Executive Assistant", "Office Administrator"),
            "senior": ("Office Manager", "Senior Executive Assistant", "Administrative Services Manager"),
        },
    }
)

FALLBACK_JOB_TITLES: tuple[str, ...] = (
    "Project Coordinator",
    "Administrative Assistant",
    "Customer Service Representative",
    "Operations Associate",
    "Business Analyst",
)
