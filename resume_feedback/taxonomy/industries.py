from __future__ import annotations

from types import MappingProxyType

GENERAL_INDUSTRY = "general"

INDUSTRY_KEYWORDS = MappingProxyType(
    {
        "technology": (
            "software", "development", "programming", "code", "javascript", "python", "java", "c++",
            "react", "angular", "vue", "node", "web", "app", "mobile", "cloud", "aws", "azure",
            "database", "sql", "nosql", "api", "rest", "graphql", "git", "agile", "scrum", "devops",
            "ci/cd", "cybersecurity", "machine learning", "ai", "data science", "blockchain",
            "frontend", "backend", "fullstack",
        ),
        "healthcare": (
            "patient", "care", "medical", "clinical", "health", "hospital", "doctor", "nurse",
            "therapy", "treatment", "diagnosis", "pharmaceutical", "medicine", "healthcare", "ehr",
            "emr", "hipaa", "biology", "anatomy", "physiology", "radiology", "surgery", "emergency",
            "pharmacy", "laboratory", "diagnostic", "therapeutic", "rehabilitation",
            "clinical trials", "medical record",
        ),
        "finance": (
            "financial", "accounting", "audit", "tax", "investment", "banking", "loan", "credit",
            "mortgage", "finance", "portfolio", "budget", "revenue", "profit", "asset", "liability",
            "capital", "equity", "stock", "bond", "security", "risk", "compliance", "regulatory",
            "fintech", "analysis", "forecast", "valuation", "merger", "acquisition", "hedge fund",
            "private equity", "trading", "wealth management",
        ),
        "marketing": (
            "marketing", "brand", "advertising", "campaign", "social media", "digital", "seo", "ppc",
            "content", "strategy", "analytics", "target", "market", "audience", "consumer",
            "customer", "conversion", "engagement", "roi", "ctr", "cpa", "cpc", "funnel",
            "lead generation", "email marketing", "crm", "affiliate", "influencer", "viral",
            "growth hacking", "marketing automation", "a/b testing",
        ),
        "education": (
            "education", "teaching", "learning", "student", "curriculum", "instruction", "classroom",
            "school", "college", "university", "course", "professor", "teacher", "faculty",
            "academic", "assessment", "pedagogy", "e-learning", "lesson plan",
            "educational technology", "distance learning", "tutoring", "educational psychology",
            "special education", "higher education", "k-12", "esl", "stem",
        ),
        GENERAL_INDUSTRY: (
            "professional", "experience", "skill", "qualified", "knowledge", "leadership",
            "management", "communication", "teamwork", "project", "problem-solving",
            "detail-oriented", "analytical", "strategic", "planning", "organization",
            "time management", "adaptability", "flexibility", "creative", "innovative", "resource",
            "efficient", "productive", "proactive",
        ),
    }
)

INDUSTRY_TRENDS = MappingProxyType(
    {
        "technology": (
            "Increasing demand for AI and machine learning expertise",
            "Growth in cloud computing and serverless architectures",
            "Rising importance of cybersecurity knowledge",
            "Shift towards full-stack development skills",
        ),
        "healthcare": (
            "Growing adoption of telehealth technologies",
            "Increased focus on data security and HIPAA compliance",
            "Rising demand for healthcare informatics",
            "Expansion of patient-centered care models",
        ),
        "finance": (
            "Expansion of fintech and digital banking",
            "Growing importance of data analysis skills",
            "Increased regulatory compliance requirements",
            "Rising demand for blockchain and cryptocurrency knowledge",
        ),
        "marketing": (
            "Growing focus on data-driven marketing strategies",
            "Increased importance of social media expertise",
            "Rising demand for content marketing skills",
            "Expansion of marketing automation technologies",
        ),
        "education": (
            "Increasing adoption of educational technology",
            "Growth in online and hybrid learning models",
            "Rising importance of personalized learning approaches",
            "Expansion of competency-based education",
        ),
    }
)

DEFAULT_TRENDS: tuple[str, ...] = (
    "Increasing importance of digital literacy across all roles",
    "Growing demand for adaptability and continuous learning",
    "Rising value of communication and collaboration skills",
    "Expansion of remote and hybrid work models",
)

# Phrases appended by the sentence improver when an industry is given.
INDUSTRY_SENTENCE_TERMS = MappingProxyType(
    {
        "technology": ("agile methodology", "DevOps practices", "cloud infrastructure", "cross-functional teams"),
        "healthcare": ("patient outcomes", "care protocols", "clinical workflows", "healthcare regulations"),
        "finance": ("financial analytics", "regulatory compliance", "risk management", "investment strategies"),
        "marketing": ("conversion rates", "customer acquisition", "brand positioning", "market segmentation"),
        "education": ("learning outcomes", "curriculum development", "student engagement", "educational assessments"),
    }
)


def normalize_industry(industry: str | None) -> str:
    cleaned = (industry or "").strip().lower()
    return cleaned or GENERAL_INDUSTRY


def is_known_industry(industry: str) -> bool:
    return industry != GENERAL_INDUSTRY and industry in INDUSTRY_KEYWORDS


def industry_keywords(industry: str) -> tuple[str, ...]:
    if is_known_industry(industry):
        return INDUSTRY_KEYWORDS[industry]
    return INDUSTRY_KEYWORDS[GENERAL_INDUSTRY]


def industry_trends(industry: str) -> tuple[str, ...]:
    return INDUSTRY_TRENDS.get(industry, DEFAULT_TRENDS)
