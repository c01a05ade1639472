# resume_engine/scorer.py
# ═══════════════════════════════════════════════════════════════════════════════
# Four-axis resume scoring
#
#   content       30%  length band, action verbs, metrics, pronoun discipline
#   structure     25%  sections, bullets, capitalization, line count
#   keywords      25%  technical / soft / industry vocabulary
#   completeness  20%  required + optional sections, email, phone
#
# Every axis reads the raw text directly. Section presence is re-checked here
# against the rubric rather than taken from detect_sections(), so the scorer
# can be exercised on its own.
# ═══════════════════════════════════════════════════════════════════════════════

import math
import re
import logging
from typing import List

from .lexicon import (ACTION_VERBS, INDUSTRY_KEYWORDS, PERSONAL_PRONOUNS,
                      SECTION_RUBRIC, SKILL_LEXICONS)
from .models import Improvement, OverallAssessment, ScoreBreakdown, Strength
from .skills import count_lexicon_hits

logger = logging.getLogger(__name__)

# ── Weights (sum = 1.0) ───────────────────────────────────────────────────────
W_CONTENT      = 0.30
W_STRUCTURE    = 0.25
W_KEYWORDS     = 0.25
W_COMPLETENESS = 0.20

STRENGTH_THRESHOLD    = 80
IMPROVEMENT_THRESHOLD = 70
HIGH_PRIORITY_BELOW   = 50

# ── Patterns ──────────────────────────────────────────────────────────────────
QUANTIFIER_RE = re.compile(r"\d+%|\$\d+|\d+\s*(?:million|thousand|k\b)", re.IGNORECASE)
PHONE_RE      = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")
BULLET_RE     = re.compile(r"[•·▪▫-]\s")
SENTENCE_RE   = re.compile(r"[.!?]+")
CAPITALIZED_RE = re.compile(r"[A-Z]")
PRONOUN_RE    = re.compile(
    r"\b(?:" + "|".join(PERSONAL_PRONOUNS) + r")\b", re.IGNORECASE
)

_GRADE_LADDER = (
    (90, "A+"), (85, "A"), (80, "A-"),
    (75, "B+"), (70, "B"), (65, "B-"),
    (60, "C+"), (55, "C"), (50, "C-"),
)

_STRENGTH_DESCRIPTIONS = {
    "content":      "Excellent use of action words and quantified achievements",
    "structure":    "Well-organized with clear sections and consistent formatting",
    "keywords":     "Strong inclusion of relevant industry keywords and skills",
    "completeness": "Contains all essential resume sections and information",
}

_IMPROVEMENT_DESCRIPTIONS = {
    "content":      "Consider adding more specific achievements and action words",
    "structure":    "Improve organization and formatting consistency",
    "keywords":     "Include more relevant skills and industry-specific terms",
    "completeness": "Add missing resume sections and contact information",
}


def round_half_up(value: float) -> int:
    # Tolerate float noise from the weighted sum (e.g. 84.4999999).
    return int(math.floor(value + 0.5 + 1e-9))


def _clamp(value: float) -> float:
    return max(0.0, min(value, 100.0))


def _section_found(text_low: str, indicators) -> bool:
    return any(ind.lower() in text_low for ind in indicators)


# ─────────────────────────────────────────────────────────────────────────────
# AXIS 1: CONTENT
# ─────────────────────────────────────────────────────────────────────────────

def score_content(text: str) -> float:
    score = 0.0
    text_low = text.lower()

    word_count = len(text.split())
    if 400 <= word_count <= 800:   score += 25
    elif 300 <= word_count < 400:  score += 20
    elif 200 <= word_count < 300:  score += 15
    elif word_count < 200:         score += 5
    else:                          score += 10   # too long

    verbs_found = sum(1 for verb in ACTION_VERBS if verb in text_low)
    score += min(verbs_found * 3, 25)

    quantifiers = len(QUANTIFIER_RE.findall(text))
    score += min(quantifiers * 5, 25)

    pronouns = len(PRONOUN_RE.findall(text))
    score += max(0, 25 - pronouns * 2)

    return _clamp(score)


# ─────────────────────────────────────────────────────────────────────────────
# AXIS 2: STRUCTURE
# ─────────────────────────────────────────────────────────────────────────────

def score_structure(text: str) -> float:
    score = 0.0
    text_low = text.lower()

    found = sum(
        1 for indicators, _, _ in SECTION_RUBRIC.values()
        if _section_found(text_low, indicators)
    )
    score += found / len(SECTION_RUBRIC) * 40

    if len(BULLET_RE.findall(text)) > 5:
        score += 20

    sentences = SENTENCE_RE.split(text)
    capitalized = sum(1 for s in sentences if CAPITALIZED_RE.match(s.strip()))
    score += capitalized / max(len(sentences), 1) * 20

    lines = [line for line in text.split("\n") if line.strip()]
    score += min(len(lines), 20)

    return _clamp(score)


# ─────────────────────────────────────────────────────────────────────────────
# AXIS 3: KEYWORDS
# ─────────────────────────────────────────────────────────────────────────────

def score_keywords(text: str) -> float:
    text_low = text.lower()

    technical = count_lexicon_hits(text, SKILL_LEXICONS["technical"])
    soft      = count_lexicon_hits(text, SKILL_LEXICONS["soft"])
    industry  = len({
        kw for keywords in INDUSTRY_KEYWORDS.values()
        for kw in keywords if kw.lower() in text_low
    })

    return _clamp(technical * 2 + soft * 1 + industry * 1.5)


# ─────────────────────────────────────────────────────────────────────────────
# AXIS 4: COMPLETENESS
# ─────────────────────────────────────────────────────────────────────────────

def score_completeness(text: str) -> float:
    score = 0.0
    text_low = text.lower()

    for indicators, required, _ in SECTION_RUBRIC.values():
        if _section_found(text_low, indicators):
            score += 20 if required else 10

    if "@" in text:
        score += 10
    if PHONE_RE.search(text):
        score += 10

    return _clamp(score)


# ─────────────────────────────────────────────────────────────────────────────
# GRADING + CLASSIFICATION
# ─────────────────────────────────────────────────────────────────────────────

def grade_for(score: float) -> str:
    for floor, grade in _GRADE_LADDER:
        if score >= floor:
            return grade
    return "D"


def identify_strengths(breakdown: ScoreBreakdown) -> List[Strength]:
    return [
        Strength(area=area.capitalize(), score=value,
                 description=_STRENGTH_DESCRIPTIONS[area])
        for area, value in breakdown.model_dump().items()
        if value >= STRENGTH_THRESHOLD
    ]


def identify_improvements(breakdown: ScoreBreakdown) -> List[Improvement]:
    # 70–79 lands in neither list: acceptable, not notable.
    return [
        Improvement(area=area.capitalize(), score=value,
                    description=_IMPROVEMENT_DESCRIPTIONS[area],
                    priority="high" if value < HIGH_PRIORITY_BELOW else "medium")
        for area, value in breakdown.model_dump().items()
        if value < IMPROVEMENT_THRESHOLD
    ]


def weighted_score(breakdown: ScoreBreakdown) -> int:
    return round_half_up(
        breakdown.content      * W_CONTENT +
        breakdown.structure    * W_STRUCTURE +
        breakdown.keywords     * W_KEYWORDS +
        breakdown.completeness * W_COMPLETENESS
    )


# ─────────────────────────────────────────────────────────────────────────────
# MAIN ENTRY
# ─────────────────────────────────────────────────────────────────────────────

def score(text: str) -> OverallAssessment:
    breakdown = ScoreBreakdown(
        content=round_half_up(score_content(text)),
        structure=round_half_up(score_structure(text)),
        keywords=round_half_up(score_keywords(text)),
        completeness=round_half_up(score_completeness(text)),
    )
    overall = weighted_score(breakdown)
    grade = grade_for(overall)

    logger.debug("Resume score: %d/100 (%s) breakdown=%s", overall, grade, breakdown.model_dump())

    return OverallAssessment(
        score=overall,
        grade=grade,
        breakdown=breakdown,
        strengths=identify_strengths(breakdown),
        improvements=identify_improvements(breakdown),
    )

