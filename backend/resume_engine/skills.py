# resume_engine/skills.py
import re
from typing import List, Mapping, Tuple

from .lexicon import CONFIDENCE_CONTEXT_WORDS, SKILL_LEXICONS
from .models import SkillMatch, SkillsSummary


def _literal(skill: str) -> "re.Pattern":
    # Lexicon entries like "c++" or "node.js" must match as written.
    return re.compile(re.escape(skill), re.IGNORECASE)


def contains_skill(text: str, skill: str) -> bool:
    return bool(_literal(skill).search(text))


def skill_confidence(skill: str, text: str) -> int:
    """
    0–100 strength of a match.

    20 points per occurrence (capped at 80), plus 20 when the skill sits right
    next to a qualifier such as "expert" or "years", in either order.
    """
    escaped = re.escape(skill)
    occurrences = len(_literal(skill).findall(text))

    has_context = any(
        re.search(rf"{escaped}\s+{word}|{word}\s+{escaped}", text, re.IGNORECASE)
        for word in CONFIDENCE_CONTEXT_WORDS
    )

    confidence = min(occurrences * 20, 80)
    if has_context:
        confidence += 20
    return max(0, min(confidence, 100))


def _scan(text: str, lexicon: Mapping[str, Tuple[str, ...]]) -> List[SkillMatch]:
    found = []
    for category, skills in lexicon.items():
        for skill in skills:
            if contains_skill(text, skill):
                found.append(SkillMatch(
                    name=skill,
                    category=category,
                    confidence=skill_confidence(skill, text),
                ))
    return found


def extract_skills(text: str) -> SkillsSummary:
    """
    Match every technical, soft and industry lexicon entry against the text.

    A skill listed under two categories (e.g. "react" under programming and
    frameworks) is reported once per category.
    """
    technical = _scan(text, SKILL_LEXICONS["technical"])
    soft      = _scan(text, SKILL_LEXICONS["soft"])
    industry  = _scan(text, SKILL_LEXICONS["industry"])

    return SkillsSummary(
        technical=technical,
        soft=soft,
        industry=industry,
        total=len(technical) + len(soft) + len(industry),
    )


def count_lexicon_hits(text: str, lexicon: Mapping[str, Tuple[str, ...]]) -> int:
    """Number of distinct lexicon entries present in the text."""
    entries = {skill for skills in lexicon.values() for skill in skills}
    return sum(1 for skill in entries if contains_skill(text, skill))
