from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MatchStatus = Literal["Match", "Partial", "No Match"]
Decision = Literal["Recommended for Interview", "Not Recommended"]
FitRecommendation = Literal["Strong Fit", "Partial Fit", "Weak Fit"]
HiringDecision = Literal["Recommended for Hire", "Not Recommended"]


class ResultModel(BaseModel):
    # Model output is checked against the wire names only; unknown keys are rejected.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False, extra="forbid")


class MatchedItem(ResultModel):
    item: str
    status: MatchStatus
    explanation: str


class SectionMatch(ResultModel):
    items: list[MatchedItem]
    score: float


class AnalysisWithScore(ResultModel):
    analysis: str
    score: float


class RecruiterAnalysisResult(ResultModel):
    job_title: str
    summary: str
    key_responsibilities_match: SectionMatch
    required_skills_match: SectionMatch
    nice_to_have_skills_match: SectionMatch
    company_culture_fit: AnalysisWithScore
    salary_and_benefits: str
    red_flags: list[str]
    interview_questions: list[str]
    overall_fit_score: float = Field(ge=0, le=100)
    fit_explanation: str
    compatibility_gaps: list[str]


class PreliminaryDecisionResult(ResultModel):
    decision: Decision
    pros: list[str]
    cons: list[str]
    explanation: str


class ConsistencyTextSection(ResultModel):
    items: str
    score: float


class ConsistencyListSection(ResultModel):
    items: list[str]
    score: float


class GapResolution(ResultModel):
    gap: str
    resolution: str
    is_resolved: bool


class GapResolutionSection(ResultModel):
    items: list[GapResolution]
    score: float


class ConsistencyAnalysisResult(ResultModel):
    consistency_score: float
    summary: str
    recommendation: FitRecommendation
    soft_skills_analysis: ConsistencyTextSection
    inconsistencies: ConsistencyListSection
    missing_from_interview: ConsistencyListSection
    new_in_interview: ConsistencyListSection
    gap_resolutions: GapResolutionSection
    pros_for_hiring: list[str]
    cons_for_hiring: list[str]
    updated_overall_fit_score: float = Field(ge=0, le=100)
    hiring_decision: HiringDecision


class RewrittenResumeResult(ResultModel):
    rewritten_resume: str
