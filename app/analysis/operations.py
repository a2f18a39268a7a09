from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

from app.analysis.content import build_content_part
from app.analysis.prompts import (
    Prompt,
    build_consistency_prompt,
    build_preliminary_decision_prompt,
    build_recruiter_analysis_prompt,
    build_resume_rewrite_prompt,
)
from app.schemas.analysis import (
    InterviewConsistencyPayload,
    PreliminaryDecisionPayload,
    RecruiterAnalysisPayload,
    ResumeRewritePayload,
)
from app.schemas.results import (
    ConsistencyAnalysisResult,
    PreliminaryDecisionResult,
    RecruiterAnalysisResult,
    RewrittenResumeResult,
)


@dataclass(frozen=True)
class OperationDescriptor:
    name: str
    payload_model: type[BaseModel]
    result_model: type[BaseModel]
    build_prompt: Callable[[BaseModel], Prompt]


def _recruiter_analysis(payload: RecruiterAnalysisPayload) -> Prompt:
    return build_recruiter_analysis_prompt(
        build_content_part(payload.job_input),
        build_content_part(payload.resume_input),
        payload.language,
    )


def _preliminary_decision(payload: PreliminaryDecisionPayload) -> Prompt:
    return build_preliminary_decision_prompt(payload.analysis_result, payload.language)


def _interview_consistency(payload: InterviewConsistencyPayload) -> Prompt:
    return build_consistency_prompt(
        build_content_part(payload.job_input),
        build_content_part(payload.resume_input),
        payload.interview_transcript,
        payload.compatibility_gaps,
        payload.language,
    )


def _resume_rewrite(payload: ResumeRewritePayload) -> Prompt:
    return build_resume_rewrite_prompt(
        build_content_part(payload.job_input),
        build_content_part(payload.resume_input),
        payload.language,
    )


OPERATIONS: dict[str, OperationDescriptor] = {
    descriptor.name: descriptor
    for descriptor in (
        OperationDescriptor(
            name="analyzeForRecruiter",
            payload_model=RecruiterAnalysisPayload,
            result_model=RecruiterAnalysisResult,
            build_prompt=_recruiter_analysis,
        ),
        OperationDescriptor(
            name="generatePreliminaryDecision",
            payload_model=PreliminaryDecisionPayload,
            result_model=PreliminaryDecisionResult,
            build_prompt=_preliminary_decision,
        ),
        OperationDescriptor(
            name="analyzeInterviewConsistency",
            payload_model=InterviewConsistencyPayload,
            result_model=ConsistencyAnalysisResult,
            build_prompt=_interview_consistency,
        ),
        OperationDescriptor(
            name="rewriteResumeForJob",
            payload_model=ResumeRewritePayload,
            result_model=RewrittenResumeResult,
            build_prompt=_resume_rewrite,
        ),
    )
}


def get_operation(name: str) -> OperationDescriptor | None:
    return OPERATIONS.get(name)
