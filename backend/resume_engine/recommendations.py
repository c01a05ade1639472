# resume_engine/recommendations.py
# ═══════════════════════════════════════════════════════════════════════════════
# Rule-based resume recommendations
#
# Each rule emits at most one recommendation. The list is then ordered by
# priority (critical first); rules of equal priority keep evaluation order.
# ═══════════════════════════════════════════════════════════════════════════════

from typing import List

from .lexicon import CORE_ACTION_VERBS, SUMMARY_WORDS
from .models import PRIORITY_RANK, Recommendation
from .scorer import QUANTIFIER_RE
from .skills import extract_skills

MIN_WORDS   = 300
MAX_WORDS   = 1000
MIN_SKILLS  = 5


def _word_count_rule(text: str) -> List[Recommendation]:
    word_count = len(text.split())
    if word_count < MIN_WORDS:
        return [Recommendation(
            type="content",
            priority="high",
            title="Expand Resume Content",
            description="Your resume is too brief. Add more detail about your achievements and responsibilities.",
            action="Add 2-3 bullet points to each job description",
        )]
    if word_count > MAX_WORDS:
        return [Recommendation(
            type="content",
            priority="medium",
            title="Condense Resume Content",
            description="Your resume is quite lengthy. Focus on the most relevant and impactful information.",
            action="Remove less relevant details and focus on key achievements",
        )]
    return []


def _skills_rule(text: str) -> List[Recommendation]:
    if extract_skills(text).total >= MIN_SKILLS:
        return []
    return [Recommendation(
        type="skills",
        priority="high",
        title="Add More Skills",
        description="Include more technical and soft skills relevant to your field.",
        action="Create a dedicated skills section with 8-12 relevant skills",
    )]


def _quantification_rule(text: str) -> List[Recommendation]:
    if QUANTIFIER_RE.search(text):
        return []
    return [Recommendation(
        type="impact",
        priority="high",
        title="Quantify Achievements",
        description="Add numbers, percentages, and metrics to demonstrate your impact.",
        action='Include specific results like "Increased sales by 25%" or "Managed team of 8"',
    )]


def _action_words_rule(text: str) -> List[Recommendation]:
    text_low = text.lower()
    if any(verb in text_low for verb in CORE_ACTION_VERBS):
        return []
    return [Recommendation(
        type="language",
        priority="medium",
        title="Use Action Words",
        description="Start bullet points with strong action verbs.",
        action='Use words like "achieved", "improved", "developed", "managed"',
    )]


def _email_rule(text: str) -> List[Recommendation]:
    if "@" in text:
        return []
    return [Recommendation(
        type="contact",
        priority="critical",
        title="Add Email Address",
        description="Your resume is missing an email address.",
        action="Include a professional email address in the contact section",
    )]


def _summary_rule(text: str) -> List[Recommendation]:
    text_low = text.lower()
    if any(word in text_low for word in SUMMARY_WORDS):
        return []
    return [Recommendation(
        type="structure",
        priority="medium",
        title="Add Professional Summary",
        description="Include a brief professional summary at the top of your resume.",
        action="Write 2-3 sentences highlighting your key qualifications",
    )]


_RULES = (
    _word_count_rule,
    _skills_rule,
    _quantification_rule,
    _action_words_rule,
    _email_rule,
    _summary_rule,
)


def recommend(text: str) -> List[Recommendation]:
    recommendations = []
    for rule in _RULES:
        recommendations.extend(rule(text))

    # sorted() is stable, so equal priorities keep rule order.
    return sorted(recommendations, key=lambda r: PRIORITY_RANK[r.priority], reverse=True)
