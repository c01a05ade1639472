# resume_engine/local_insights.py
# ─────────────────────────────────────────────────────────────────────────────
# Deterministic stand-in for the remote insight provider.
#
# Everything here is derived from (text, base result) alone, so two calls
# with the same inputs always produce the same report. No function in this
# module raises on well-formed input; a signal that cannot be computed is
# simply left out.
# ─────────────────────────────────────────────────────────────────────────────

import re
from typing import List

from .lexicon import INDUSTRY_FOCUS, LEADERSHIP_VERBS, MODERN_PRACTICES, WEAK_PHRASES
from .models import AnalysisResult, LocalInsight

MAX_INSIGHTS     = 4
MAX_ENHANCEMENTS = 5

_NUMBERS_RE         = re.compile(r"\d+%|\$\d+|\d+\s*(?:years?|months?)", re.IGNORECASE)
_WEAK_PHRASE_RE     = re.compile("|".join(re.escape(p) for p in WEAK_PHRASES), re.IGNORECASE)
_QUANTIFIED_RE      = re.compile(r"\d+%|\$[\d,]+|saved|increased|reduced|improved.*\d+", re.IGNORECASE)
_STRONG_METRIC_RE   = re.compile(r"\d+%.*improved|increased.*\d+%|reduced.*\d+%", re.IGNORECASE)


def detect_industry_focus(text: str) -> List[str]:
    """Industries with at least two distinct keyword hits, in table order."""
    text_low = text.lower()
    return [
        industry
        for industry, keywords in INDUSTRY_FOCUS.items()
        if sum(1 for kw in keywords if kw in text_low) >= 2
    ]


def generate_insights(text: str, base: AnalysisResult) -> List[str]:
    insights = []
    technical = len(base.skills.technical)

    if technical > 8:
        insights.append("Strong technical skill diversity suggests versatility and adaptability to different technology stacks.")
    elif technical < 5:
        insights.append("Limited technical skills listed - consider expanding to show broader capabilities.")

    if _NUMBERS_RE.search(text):
        insights.append("Good use of quantified achievements demonstrates measurable impact and results-oriented mindset.")
    else:
        insights.append("Adding specific metrics and numbers would significantly strengthen impact statements.")

    industries = detect_industry_focus(text)
    if industries:
        insights.append(f"Strong alignment with {' and '.join(industries)} industry standards and terminology.")

    text_low = text.lower()
    if any(verb in text_low for verb in LEADERSHIP_VERBS):
        insights.append("Leadership experience evident - valuable for senior and management-track positions.")

    return insights[:MAX_INSIGHTS]


def career_positioning(text: str, base: AnalysisResult) -> str:
    advice = "Based on your skill profile, "

    if len(base.skills.technical) > len(base.skills.soft):
        advice += "you're well-positioned for technical roles and should emphasize your technical expertise. "
    else:
        advice += "your balanced skill set suggests good fit for hybrid technical-business roles. "

    if "technology" in detect_industry_focus(text):
        advice += ("Your tech industry alignment is strong - consider highlighting experience with modern "
                   "development practices, cloud technologies, and agile methodologies.")
    else:
        advice += ("Consider emphasizing transferable technical skills and any exposure to digital "
                   "transformation initiatives.")

    return advice


def content_enhancements(text: str, base: AnalysisResult) -> List[str]:
    suggestions = []
    skills = base.skills

    if base.overall.breakdown.structure < 70:
        suggestions.append("Restructure content with clear sections: Summary, Experience, Skills, Education, Projects")
        suggestions.append("Use consistent bullet point formatting and parallel structure")

    if skills.total < 8:
        suggestions.append("Expand skills section with both technical and soft skills relevant to your target role")
    if skills.technical and len(skills.soft) < 3:
        suggestions.append("Balance technical skills with soft skills like leadership, communication, and problem-solving")

    if _WEAK_PHRASE_RE.search(text):
        suggestions.append("Replace weak phrases like 'responsible for' with strong action verbs like 'achieved', 'implemented', 'optimized'")

    if not _QUANTIFIED_RE.search(text):
        suggestions.append("Add specific metrics: 'Increased efficiency by 30%', 'Managed budget of $500K', 'Led team of 8 developers'")

    return suggestions[:MAX_ENHANCEMENTS]


def industry_alignment(text: str) -> str:
    industries = detect_industry_focus(text)
    text_low = text.lower()

    alignment = "Your resume shows "
    if not industries:
        alignment += "limited industry-specific terminology. Consider adding relevant industry keywords and concepts."
    elif len(industries) == 1:
        alignment += f"strong alignment with the {industries[0]} industry. Good use of relevant terminology and concepts."
    else:
        alignment += f"versatility across {' and '.join(industries)} industries, which is valuable for cross-functional roles."

    modern_count = sum(1 for term in MODERN_PRACTICES if term in text_low)
    if modern_count >= 3:
        alignment += " Strong evidence of modern industry practices and methodologies."

    return alignment


def competitive_edge(text: str, base: AnalysisResult) -> str:
    skills, overall = base.skills, base.overall
    edge = ""

    if len(skills.technical) > 5 and len(skills.soft) > 3:
        edge += "Strong combination of technical depth and soft skills creates competitive advantage. "

    if _STRONG_METRIC_RE.search(text):
        edge += "Quantified achievements demonstrate clear business impact. "

    if overall.score < 75:
        focus = [imp.area.lower() for imp in overall.improvements[:2]]
        if focus:
            edge += "To strengthen competitive position, focus on: " + " and ".join(focus) + "."
    else:
        edge += "Strong overall profile - focus on tailoring content for specific target roles."

    return edge.strip() or "Solid foundation with room for strategic positioning improvements."


def local_ai_score(base: AnalysisResult) -> int:
    ai_score = base.overall.score
    technical, soft = len(base.skills.technical), len(base.skills.soft)

    if base.skills.total > 10:
        ai_score += 3
    if technical > 0 and soft > 0 and abs(technical - soft) <= 3:
        ai_score += 2
    if len(base.overall.improvements) > 3:
        ai_score -= 2

    return max(0, min(ai_score, 100))


def generate_local_insights(text: str, base: AnalysisResult) -> LocalInsight:
    return LocalInsight(
        insights=generate_insights(text, base),
        career_positioning=career_positioning(text, base),
        content_enhancements=content_enhancements(text, base),
        industry_alignment=industry_alignment(text),
        competitive_edge=competitive_edge(text, base),
        ai_score=local_ai_score(base),
        confidence="high",
    )
