# resume_engine/ai_insights.py
# ─────────────────────────────────────────────────────────────────────────────
# Enrichment: narrative insights layered over a base analysis.
#
# One remote attempt, no retries:
#
#   NOT_STARTED ──► REMOTE_ATTEMPTED ──► SUCCEEDED
#        │                 │
#        │                 └──────────► FELL_BACK_TO_LOCAL
#        └─ (no provider configured) ─► FELL_BACK_TO_LOCAL
#
# Provider failures are ordinary input here, not errors for the caller: any
# transport problem, timeout or unparseable reply is logged at warning level
# and the local generator rebuilds the report from (text, base) alone.
# ─────────────────────────────────────────────────────────────────────────────

import json
import logging
import re
from typing import Optional

import httpx
from anthropic import Anthropic, APIError
from pydantic import ValidationError

from .config import InsightConfig, load_insight_config
from .errors import (InsightProviderError, MalformedProviderResponseError,
                     ProviderUnavailableError)
from .local_insights import generate_local_insights
from .models import (AnalysisResult, EnrichedResult, EnrichmentState,
                     ProviderInsightPayload, RemoteInsight)
from .scorer import grade_for

logger = logging.getLogger(__name__)

_EXCERPT_CHARS = 2000

_SYSTEM_PROMPT = (
    "You are an expert resume analyst and career coach. Provide detailed, "
    "actionable feedback to help improve resumes for better job prospects."
)

_INSIGHT_PROMPT = """Analyze this resume and provide intelligent insights.

RESUME TEXT:
{resume_text}

CURRENT ANALYSIS:
- Overall Score: {score}/100 ({grade})
- Skills Found: {skills_total}
- Strengths: {strengths}
- Improvements: {improvements}

Provide:
1. INTELLIGENT INSIGHTS (3-4 key observations)
2. CAREER POSITIONING (how to better position for target roles)
3. CONTENT ENHANCEMENT (specific content improvements)
4. INDUSTRY ALIGNMENT (how well aligned with industry standards)
5. COMPETITIVE EDGE (what makes this resume stand out or what's missing)

Return ONLY valid JSON, no explanation, no markdown:
{{
  "insights": ["insight1", "insight2"],
  "careerPositioning": "detailed positioning advice",
  "contentEnhancements": ["enhancement1", "enhancement2"],
  "industryAlignment": "alignment assessment",
  "competitiveEdge": "competitive analysis",
  "aiScore": 85,
  "confidence": "high"
}}"""

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def _clean_json(raw: str) -> str:
    """Strip markdown fences and whitespace from the model's response."""
    raw = raw.strip()
    raw = re.sub(r"^```json\s*", "", raw, flags=re.MULTILINE)
    raw = re.sub(r"^```\s*",     "", raw, flags=re.MULTILINE)
    return raw.strip()


def build_prompt(text: str, base: AnalysisResult) -> str:
    overall = base.overall
    excerpt = text[:_EXCERPT_CHARS]
    if len(text) > _EXCERPT_CHARS:
        excerpt += "..."
    return _INSIGHT_PROMPT.format(
        resume_text=excerpt,
        score=overall.score,
        grade=overall.grade,
        skills_total=base.skills.total,
        strengths=", ".join(s.area for s in overall.strengths) or "none",
        improvements=", ".join(i.area for i in overall.improvements) or "none",
    )


def parse_provider_response(raw: str) -> ProviderInsightPayload:
    match = _JSON_OBJECT_RE.search(_clean_json(raw))
    if not match:
        raise MalformedProviderResponseError("No JSON object in provider response")
    try:
        return ProviderInsightPayload.model_validate(json.loads(match.group(0)))
    except (json.JSONDecodeError, ValidationError) as e:
        raise MalformedProviderResponseError(f"Unusable provider response: {e}") from e


def _get_client(config: InsightConfig) -> Anthropic:
    # max_retries=0: exactly one attempt per analysis.
    return Anthropic(
        api_key=config.api_key,
        timeout=httpx.Timeout(config.timeout_seconds),
        max_retries=0,
    )


def fetch_remote_insights(text: str, base: AnalysisResult, config: InsightConfig) -> RemoteInsight:
    """
    Ask the configured provider for insights.

    Raises ProviderUnavailableError when nothing is configured or the call
    fails in transport, MalformedProviderResponseError when the reply is not
    the expected JSON object.
    """
    if not config.remote_enabled:
        raise ProviderUnavailableError(f"No insight provider configured (provider={config.provider})")

    try:
        response = _get_client(config).messages.create(
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=0.3,
            system=_SYSTEM_PROMPT,
            messages=[{"role": "user", "content": build_prompt(text, base)}],
        )
    except APIError as e:
        raise ProviderUnavailableError(f"Insight provider call failed: {e}") from e

    raw = getattr(response.content[0], "text", None) if response.content else None
    if not raw:
        raise MalformedProviderResponseError("Empty provider response")

    payload = parse_provider_response(raw)

    # A missing or zero score keeps the base score.
    ai_score = payload.ai_score or base.overall.score

    return RemoteInsight(
        insights=payload.insights,
        career_positioning=payload.career_positioning,
        content_enhancements=payload.content_enhancements,
        industry_alignment=payload.industry_alignment,
        competitive_edge=payload.competitive_edge,
        ai_score=max(0, min(ai_score, 100)),
        confidence=payload.confidence,
    )


def enrich(text: str, base: AnalysisResult, config: Optional[InsightConfig] = None) -> EnrichedResult:
    config = config or load_insight_config()
    state = EnrichmentState.NOT_STARTED

    if config.remote_enabled:
        state = EnrichmentState.REMOTE_ATTEMPTED
        try:
            remote = fetch_remote_insights(text, base, config)
        except InsightProviderError as e:
            logger.warning("Insight provider failed (model=%s), using local insights: %s", config.model, e)
        else:
            logger.info("Remote insights received (model=%s, ai_score=%d)", config.model, remote.ai_score)
            overall = base.overall.model_copy(update={
                "score": remote.ai_score,
                "grade": grade_for(remote.ai_score),
            })
            return EnrichedResult(
                **{**dict(base), "overall": overall},
                ai=remote,
                enrichment_state=EnrichmentState.SUCCEEDED,
            )
    else:
        logger.warning("No insight provider configured (provider=%s), using local insights", config.provider)

    local = generate_local_insights(text, base)
    logger.debug("Local insights generated after state=%s", state.value)

    return EnrichedResult(
        **dict(base),
        ai=local,
        enrichment_state=EnrichmentState.FELL_BACK_TO_LOCAL,
    )
