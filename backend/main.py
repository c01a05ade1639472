from dotenv import load_dotenv
load_dotenv()  # must run before the engine reads ANTHROPIC_API_KEY

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
import logging
import os
from models import AnalysisRequest, BatchRequest, CompareRequest, StatsRequest
from resume_engine import (EmptyInputError, analysis_stats, analyze_many,
                           analyze_resume, compare_analyses, normalize_text,
                           run_analysis)
from resume_engine.models import BatchItem

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

API_VERSION = "1.0"

app = FastAPI(title="Resume Insight API", version=API_VERSION)

ALLOWED_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

MAX_TEXT_LENGTH = 50000
MIN_RESUME_LENGTH = 50
MAX_BATCH_SIZE = 20


def _prepare(text: str, label: str = "Resume") -> str:
    if not text.strip():
        raise HTTPException(status_code=400, detail=f"{label} text cannot be empty.")
    if len(text) > MAX_TEXT_LENGTH:
        raise HTTPException(status_code=400, detail=f"{label} exceeds maximum length of {MAX_TEXT_LENGTH} characters.")

    cleaned = normalize_text(text)
    if len(cleaned) < MIN_RESUME_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"{label} content is too short for meaningful analysis (minimum {MIN_RESUME_LENGTH} characters).",
        )
    return cleaned


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/")
async def health():
    return {"status": "online", "version": API_VERSION}


@app.post("/analyze")
async def analyze(request: AnalysisRequest):
    text = _prepare(request.resume_text)
    try:
        # Enrichment may block on the provider call; keep it off the event loop.
        result = await run_in_threadpool(analyze_resume, text, request.enrich)
        logger.info("Analysis served (score=%s, enriched=%s)", result.overall.score, request.enrich)
        return result
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.error("Analysis failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal analysis engine error. Please try again.")


@app.post("/analyze/batch")
async def analyze_batch(request: BatchRequest):
    if len(request.resumes) > MAX_BATCH_SIZE:
        raise HTTPException(status_code=400, detail=f"Batch exceeds maximum of {MAX_BATCH_SIZE} resumes.")

    results = []
    try:
        for entry in request.resumes:
            try:
                text = _prepare(entry.resume_text)
            except HTTPException as exc:
                results.append(BatchItem(label=entry.label, success=False, error=exc.detail))
                continue
            results.extend(await run_in_threadpool(analyze_many, [(entry.label, text)]))
        return results
    except Exception as exc:
        logger.error("Batch analysis failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal analysis engine error. Please try again.")


@app.post("/compare")
async def compare(request: CompareRequest):
    first = _prepare(request.first_text, "First resume")
    second = _prepare(request.second_text, "Second resume")
    try:
        return compare_analyses(run_analysis(first), run_analysis(second))
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.error("Comparison failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal analysis engine error. Please try again.")


@app.post("/stats")
async def stats(request: StatsRequest):
    text = _prepare(request.resume_text)
    try:
        return analysis_stats(run_analysis(text))
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.error("Stats failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal analysis engine error. Please try again.")
