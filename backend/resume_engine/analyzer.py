# resume_engine/analyzer.py
# ─────────────────────────────────────────────────────────────────────────────
# Central analysis orchestrator.
#
# Flow:
#   1. Skill extraction and section detection (independent of each other)
#   2. Four-axis score straight from the raw text
#   3. Rule-based recommendations
#   4. Metadata, then optional enrichment on top of the finished base result
#
# Every call builds fresh records; nothing is cached between analyses.
# ─────────────────────────────────────────────────────────────────────────────

import json
import logging
import math
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple, Union

from .ai_insights import enrich
from .config import InsightConfig
from .errors import EmptyInputError
from .models import (AnalysisComparison, AnalysisMetadata, AnalysisResult,
                     AnalysisStats, BatchItem, Delta, EnrichedResult)
from .recommendations import recommend
from .scorer import score
from .sections import detect_sections
from .skills import extract_skills

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 10
WORDS_PER_MINUTE = 200

_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_RE    = re.compile(r"[\u0000-\u001F\u007F-\u009F]")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and drop control characters."""
    text = _WHITESPACE_RE.sub(" ", text or "")
    return _CONTROL_RE.sub("", text).strip()


def _build_metadata(text: str) -> AnalysisMetadata:
    word_count = len(text.split())
    return AnalysisMetadata(
        word_count=word_count,
        character_count=len(text),
        estimated_read_time=math.ceil(word_count / WORDS_PER_MINUTE),
        analyzed_at=_now(),
    )


def run_analysis(text: str) -> AnalysisResult:
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        raise EmptyInputError("No text content found in resume")

    skills = extract_skills(text)
    sections = detect_sections(text)
    overall = score(text)
    recommendations = recommend(text)

    logger.info(
        "Analysis complete: score=%d grade=%s skills=%d recommendations=%d",
        overall.score, overall.grade, skills.total, len(recommendations),
    )

    return AnalysisResult(
        overall=overall,
        sections=sections,
        skills=skills,
        recommendations=recommendations,
        metadata=_build_metadata(text),
    )


def analyze_resume(
    text: str,
    with_insights: bool = False,
    config: Optional[InsightConfig] = None,
) -> Union[AnalysisResult, EnrichedResult]:
    base = run_analysis(text)
    if not with_insights:
        return base
    return enrich(text, base, config)


def analyze_many(items: Iterable[Tuple[str, str]]) -> List[BatchItem]:
    """
    Analyse several labelled texts. An unusable text is recorded as a failed
    item; the rest of the batch still runs.
    """
    results = []
    for label, text in items:
        try:
            results.append(BatchItem(label=label, success=True, result=run_analysis(text)))
        except EmptyInputError as e:
            logger.warning("Skipping %s: %s", label, e)
            results.append(BatchItem(label=label, success=False, error=str(e)))
    return results


def _delta(first: float, second: float) -> Delta:
    return Delta(first=first, second=second, difference=second - first)


def compare_analyses(first: AnalysisResult, second: AnalysisResult) -> AnalysisComparison:
    first_axes = first.overall.breakdown.model_dump()
    second_axes = second.overall.breakdown.model_dump()

    return AnalysisComparison(
        scores=_delta(first.overall.score, second.overall.score),
        skills=_delta(first.skills.total, second.skills.total),
        recommendations=_delta(len(first.recommendations), len(second.recommendations)),
        breakdown={axis: _delta(first_axes[axis], second_axes[axis]) for axis in first_axes},
        compared_at=_now(),
    )


def analysis_stats(result: AnalysisResult) -> AnalysisStats:
    overall, meta = result.overall, result.metadata
    return AnalysisStats(
        score=overall.score,
        grade=overall.grade,
        strengths=len(overall.strengths),
        improvements=len(overall.improvements),
        word_count=meta.word_count,
        skills_found=result.skills.total,
        recommendations_count=len(result.recommendations),
        reading_time=meta.estimated_read_time,
    )


def export_analysis(result: AnalysisResult, file_name: str = "resume") -> str:
    return json.dumps(
        {
            "file_name":   file_name,
            "analysis":    result.model_dump(mode="json"),
            "exported_at": _now(),
            "format":      "json",
        },
        indent=2,
    )
