from __future__ import annotations

EDUCATION_TERMS: tuple[str, ...] = (
    "degree", "university", "college", "bachelor", "master", "phd", "diploma", "graduate",
    "certification", "certificate", "b.s.", "b.a.", "m.s.", "m.a.", "ph.d", "mba", "major",
    "minor", "gpa", "cum laude", "magna cum laude", "summa cum laude",
)

EXPERIENCE_TERMS: tuple[str, ...] = (
    "experience", "work", "job", "position", "role", "company", "employer", "client",
    "responsible for", "lead", "manage", "develop", "create", "implement", "coordinator",
    "specialist", "analyst", "assistant", "director", "supervisor", "manager", "head", "chief",
    "senior", "junior", "intern", "consultant", "contractor", "freelance",
)

SKILL_TERMS: tuple[str, ...] = (
    "skill", "skills", "proficient", "knowledge", "expertise", "competent", "capable", "familiar",
    "advanced", "programming", "language", "software", "tool", "framework", "platform", "system",
    "methodology", "certified", "trained", "experienced in", "proficiency", "fluent", "excel at",
)

ACHIEVEMENT_VERBS: tuple[str, ...] = (
    "achieved", "led", "increased", "improved", "reduced", "created", "developed", "managed",
    "organized", "generated", "delivered", "produced", "launched", "implemented", "established",
    "streamlined", "optimized",
)

QUANTIFIER_TERMS: tuple[str, ...] = (
    "%", "percent", "increased by", "reduced by", "million", "thousand", "grew", "decreased",
    "saved", "revenue", "profit", "cost", "budget", "roi", "kpi", "metric", "target", "goal",
    "rate", "average", "$", "€", "£", "¥", "dollar", "euro",
)

GENERIC_PHRASES: tuple[str, ...] = (
    "team player", "hard worker", "detail-oriented", "self-starter", "motivated", "passionate",
    "results-driven", "go-getter",
)

# Substrings that mark an industry keyword as a technical skill rather than a domain term.
SKILL_MARKERS: tuple[str, ...] = (
    "programming", "development", "design", "management", "analysis", "skill", "proficient",
    "certified", "tool", "software", "platform", "language", "framework",
)

SOFT_SKILLS: tuple[str, ...] = (
    "Problem Solving", "Critical Thinking", "Time Management", "Communication", "Leadership",
)

PROBLEMATIC_CHARACTERS: tuple[str, ...] = ("•", "►", "→", "✓", "|", "*", "№", "©", "®", "™")
