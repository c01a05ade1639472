from .analyzer import (analysis_stats, analyze_many, analyze_resume,
                       compare_analyses, export_analysis, normalize_text,
                       run_analysis)
from .ai_insights import enrich
from .errors import (EmptyInputError, MalformedProviderResponseError,
                     ProviderUnavailableError, ResumeAnalysisError)
from .recommendations import recommend
from .scorer import score
from .sections import detect_sections
from .skills import extract_skills

__all__ = [
    "analysis_stats", "analyze_many", "analyze_resume", "compare_analyses",
    "detect_sections", "enrich", "export_analysis", "extract_skills",
    "normalize_text", "recommend", "run_analysis", "score",
    "EmptyInputError", "MalformedProviderResponseError",
    "ProviderUnavailableError", "ResumeAnalysisError",
]
