import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from gpacalc.config.settings import settings
from gpacalc.domain.logic.gpa import aggregate
from gpacalc.domain.logic.grading import evaluate
from gpacalc.domain.models.entities import InvalidEntries, NoEntries, SubjectEntry, Success
from gpacalc.state.form_state import format_outcome

logger = logging.getLogger(__name__)

app = FastAPI(title="GPA Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MarksPayload(BaseModel):
    marks: float


class SubjectPayload(BaseModel):
    name: str = ""
    marks: float
    credit_hours: float


class GpaPayload(BaseModel):
    subjects: List[SubjectPayload] = Field(default_factory=list)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/grade")
def grade(payload: MarksPayload) -> Dict:
    try:
        result = evaluate(payload.marks)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return {"grade_point": result.grade_point, "letter_grade": result.letter_grade}


@app.post("/gpa")
def gpa(payload: GpaPayload) -> Dict:
    entries = [SubjectEntry(marks=s.marks, credit_hours=s.credit_hours) for s in payload.subjects]
    outcome = aggregate(entries)
    body: Dict = {
        "status": "ok",
        "overall_gpa": None,
        "display": format_outcome(outcome),
        "grades": [],
        "issues": [],
    }
    if isinstance(outcome, Success):
        body["overall_gpa"] = outcome.overall_gpa
        body["grades"] = [
            {
                "name": subject.name,
                "grade_point": result.grade_point,
                "letter_grade": result.letter_grade,
            }
            for subject, result in zip(payload.subjects, outcome.grades)
        ]
    elif isinstance(outcome, NoEntries):
        body["status"] = "no_entries"
    elif isinstance(outcome, InvalidEntries):
        body["status"] = "invalid"
        body["issues"] = [{"index": issue.index, "field": issue.field} for issue in outcome.issues]
        logger.info("Rejected batch of %d subjects with %d issue(s)", len(entries), len(outcome.issues))
    return body
