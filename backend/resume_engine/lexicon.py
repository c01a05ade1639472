# resume_engine/lexicon.py
# ─────────────────────────────────────────────────────────────────────────────
# Static lookup tables shared by every analysis stage.
#
# Everything here is read-only: category → tuple of canonical strings, wrapped
# in MappingProxyType so no caller can mutate a table between analyses.
# Entries are lowercase; matching is always case-insensitive and literal.
# ─────────────────────────────────────────────────────────────────────────────

from types import MappingProxyType
from typing import Mapping, Tuple

LEXICON_VERSION = "1.0"


def _freeze(table: dict) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in table.items()})


# ── Skill lexicons (used by the extractor and the keyword sub-score) ─────────

TECHNICAL_SKILLS = _freeze({
    "programming": [
        "javascript", "python", "java", "cplusplus", "csharp", "php", "ruby", "go", "rust", "kotlin",
        "swift", "typescript", "scala", "perl", "r", "matlab", "sql", "html", "css", "sass",
        "less", "react", "angular", "vue", "node.js", "express", "django", "flask", "spring",
        "laravel", "rails", "asp.net", "jquery", "bootstrap", "tailwind", "c++", "c#",
    ],
    "frameworks": [
        "react", "angular", "vue.js", "node.js", "express.js", "django", "flask", "spring boot",
        "laravel", "ruby on rails", "asp.net", "ember.js", "backbone.js", "meteor", "gatsby",
        "next.js", "nuxt.js", "svelte", "fastapi", "nestjs",
    ],
    "databases": [
        "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sqlite", "oracle",
        "sql server", "dynamodb", "cassandra", "neo4j", "firebase", "supabase",
    ],
    "cloud": [
        "aws", "azure", "google cloud", "gcp", "docker", "kubernetes", "jenkins", "gitlab ci",
        "github actions", "terraform", "ansible", "chef", "puppet", "vagrant",
    ],
    "tools": [
        "git", "github", "gitlab", "bitbucket", "jira", "confluence", "slack", "figma",
        "sketch", "adobe xd", "photoshop", "illustrator", "vs code", "intellij", "eclipse",
    ],
})

SOFT_SKILLS = _freeze({
    "leadership": [
        "leadership", "team management", "project management", "strategic planning",
        "mentoring", "coaching", "delegation", "decision making", "conflict resolution",
    ],
    "communication": [
        "communication", "presentation", "public speaking", "writing", "documentation",
        "interpersonal skills", "collaboration", "negotiation", "customer service",
    ],
    "analytical": [
        "problem solving", "analytical thinking", "critical thinking", "research",
        "data analysis", "troubleshooting", "debugging", "optimization",
    ],
    "personal": [
        "adaptability", "creativity", "innovation", "time management", "organization",
        "attention to detail", "multitasking", "self-motivated", "proactive",
    ],
})

INDUSTRY_SKILLS = _freeze({
    "marketing": [
        "seo", "sem", "google analytics", "social media marketing", "content marketing",
        "email marketing", "ppc", "conversion optimization", "a/b testing", "hubspot",
    ],
    "finance": [
        "financial analysis", "budgeting", "forecasting", "risk management", "excel",
        "quickbooks", "sap", "bloomberg terminal", "financial modeling",
    ],
    "design": [
        "ui/ux design", "graphic design", "web design", "prototyping", "wireframing",
        "user research", "usability testing", "design thinking", "brand design",
    ],
})

SKILL_LEXICONS = MappingProxyType({
    "technical": TECHNICAL_SKILLS,
    "soft":      SOFT_SKILLS,
    "industry":  INDUSTRY_SKILLS,
})

# ── Industry context keywords (keyword sub-score only) ───────────────────────

INDUSTRY_KEYWORDS = _freeze({
    "technology": [
        "software", "development", "programming", "coding", "algorithm", "architecture",
        "api", "database", "frontend", "backend", "fullstack", "devops", "agile", "scrum",
    ],
    "marketing": [
        "campaign", "brand", "digital marketing", "growth", "acquisition", "retention",
        "roi", "kpi", "conversion", "engagement", "lead generation",
    ],
    "finance": [
        "accounting", "audit", "tax", "investment", "portfolio", "compliance",
        "financial reporting", "budgeting", "forecasting", "valuation",
    ],
    "healthcare": [
        "patient care", "medical", "clinical", "diagnosis", "treatment", "healthcare",
        "nursing", "pharmacy", "surgery", "research",
    ],
})

# ── Industry focus patterns (enrichment only; an industry needs 2+ hits) ─────

INDUSTRY_FOCUS = _freeze({
    "technology": ["software", "programming", "development", "tech", "digital", "api", "database"],
    "finance":    ["financial", "banking", "investment", "accounting", "audit", "portfolio"],
    "healthcare": ["medical", "clinical", "patient", "healthcare", "hospital", "pharmacy"],
    "marketing":  ["marketing", "campaign", "brand", "advertising", "social media", "seo"],
    "education":  ["education", "teaching", "curriculum", "student", "academic", "research"],
})

# ── Section rubric ───────────────────────────────────────────────────────────
# name → (indicator phrases, required, weight). Weights are documentation
# metadata reported by the section detector; the scorer never reads them.

SECTION_RUBRIC = MappingProxyType({
    "contact": (
        ("email", "phone", "address", "linkedin", "github", "@", "tel:", "mailto:"),
        True, 0.15,
    ),
    "summary": (
        ("summary", "objective", "profile", "about", "overview"),
        True, 0.10,
    ),
    "experience": (
        ("experience", "work history", "employment", "career", "professional"),
        True, 0.35,
    ),
    "education": (
        ("education", "degree", "university", "college", "school", "certification"),
        True, 0.20,
    ),
    "skills": (
        ("skills", "technical skills", "competencies", "expertise", "technologies"),
        True, 0.15,
    ),
    "projects": (
        ("projects", "portfolio", "work samples", "achievements"),
        False, 0.05,
    ),
})

# ── Word lists ───────────────────────────────────────────────────────────────

ACTION_VERBS = (
    "achieved", "improved", "increased", "developed", "created", "managed", "led",
    "implemented", "designed", "optimized", "reduced", "streamlined", "delivered",
)

# The recommendation rule only looks for the core six.
CORE_ACTION_VERBS = ("achieved", "improved", "increased", "developed", "managed", "led")

CONFIDENCE_CONTEXT_WORDS = ("experience", "expert", "proficient", "skilled", "years")

PERSONAL_PRONOUNS = ("i", "me", "my", "myself")

SUMMARY_WORDS = ("summary", "objective", "profile")

LEADERSHIP_VERBS = ("led", "managed", "directed", "coordinated", "supervised")

MODERN_PRACTICES = ("agile", "scrum", "devops", "cloud", "digital transformation", "automation")

WEAK_PHRASES = ("responsible for", "duties included", "worked on")
