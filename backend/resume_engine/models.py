from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Priority = Literal["critical", "high", "medium", "low"]

PRIORITY_RANK: Dict[str, int] = {"critical": 4, "high": 3, "medium": 2, "low": 1}


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class SkillMatch(_Record):
    name:       str
    category:   str
    confidence: int = Field(ge=0, le=100)


class SkillsSummary(_Record):
    technical: List[SkillMatch]
    soft:      List[SkillMatch]
    industry:  List[SkillMatch]
    total:     int


class SectionReport(_Record):
    name:        str
    present:     bool
    required:    bool
    weight:      float
    score:       int
    suggestions: List[str]


class ScoreBreakdown(_Record):
    content:      int = Field(ge=0, le=100)
    structure:    int = Field(ge=0, le=100)
    keywords:     int = Field(ge=0, le=100)
    completeness: int = Field(ge=0, le=100)


class Strength(_Record):
    area:        str
    score:       int
    description: str


class Improvement(_Record):
    area:        str
    score:       int
    description: str
    priority:    Literal["high", "medium"]


class OverallAssessment(_Record):
    score:        int = Field(ge=0, le=100)
    grade:        str
    breakdown:    ScoreBreakdown
    strengths:    List[Strength]
    improvements: List[Improvement]


class Recommendation(_Record):
    type:        str
    priority:    Priority
    title:       str
    description: str
    action:      str


class AnalysisMetadata(_Record):
    word_count:          int
    character_count:     int
    estimated_read_time: int
    analyzed_at:         str


class AnalysisResult(_Record):
    overall:         OverallAssessment
    sections:        Dict[str, SectionReport]
    skills:          SkillsSummary
    recommendations: List[Recommendation]
    metadata:        AnalysisMetadata


# ── Enrichment ───────────────────────────────────────────────────────────────

class EnrichmentState(str, Enum):
    NOT_STARTED        = "not_started"
    REMOTE_ATTEMPTED   = "remote_attempted"
    SUCCEEDED          = "succeeded"
    FELL_BACK_TO_LOCAL = "fell_back_to_local"


class ProviderInsightPayload(BaseModel):
    """Shape a remote provider must return; validated before use."""
    insights:             List[str]
    career_positioning:   str = Field(alias="careerPositioning")
    content_enhancements: List[str] = Field(alias="contentEnhancements")
    industry_alignment:   str = Field(alias="industryAlignment")
    competitive_edge:     str = Field(alias="competitiveEdge")
    ai_score:             Optional[int] = Field(default=None, alias="aiScore")
    confidence:           str = "medium"

    model_config = ConfigDict(populate_by_name=True)


class _InsightReport(_Record):
    insights:             List[str]
    career_positioning:   str
    content_enhancements: List[str]
    industry_alignment:   str
    competitive_edge:     str
    ai_score:             int = Field(ge=0, le=100)
    confidence:           str


class RemoteInsight(_InsightReport):
    source: Literal["remote"] = "remote"


class LocalInsight(_InsightReport):
    source: Literal["enhanced_local"] = "enhanced_local"


InsightReport = Annotated[Union[RemoteInsight, LocalInsight], Field(discriminator="source")]


class EnrichedResult(AnalysisResult):
    ai:               InsightReport
    enrichment_state: EnrichmentState


# ── Supplementary views ──────────────────────────────────────────────────────

class Delta(_Record):
    first:      float
    second:     float
    difference: float


class AnalysisComparison(_Record):
    scores:          Delta
    skills:          Delta
    recommendations: Delta
    breakdown:       Dict[str, Delta]
    compared_at:     str


class AnalysisStats(_Record):
    score:                 int
    grade:                 str
    strengths:             int
    improvements:          int
    word_count:            int
    skills_found:          int
    recommendations_count: int
    reading_time:          int


class BatchItem(_Record):
    label:   str
    success: bool
    result:  Optional[AnalysisResult] = None
    error:   Optional[str] = None
