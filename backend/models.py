from pydantic import BaseModel
from typing import List


class AnalysisRequest(BaseModel):
    resume_text: str
    enrich: bool = False


class BatchEntry(BaseModel):
    label: str
    resume_text: str


class BatchRequest(BaseModel):
    resumes: List[BatchEntry]


class CompareRequest(BaseModel):
    first_text: str
    second_text: str


class StatsRequest(BaseModel):
    resume_text: str
