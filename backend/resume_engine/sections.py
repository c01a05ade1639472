# resume_engine/sections.py
from typing import Dict

from .lexicon import SECTION_RUBRIC
from .models import SectionReport


def detect_sections(text: str) -> Dict[str, SectionReport]:
    """
    Report every rubric section, present or not.

    A section counts as present when any of its indicator phrases appears
    anywhere in the text (case-insensitive substring).
    """
    text_low = text.lower()
    sections = {}

    for name, (indicators, required, weight) in SECTION_RUBRIC.items():
        present = any(ind.lower() in text_low for ind in indicators)
        sections[name] = SectionReport(
            name=name,
            present=present,
            required=required,
            weight=weight,
            score=100 if present else 0,
            suggestions=[] if present else [f"Add a {name} section to your resume"],
        )

    return sections
