from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileContent(CamelModel):
    data: str
    mime_type: str


class AnalysisInput(CamelModel):
    content: str | FileContent
    format: Literal["text", "file"] = "text"

    @model_validator(mode="after")
    def _text_needs_string(self) -> "AnalysisInput":
        if self.format == "text" and not isinstance(self.content, str):
            raise ValueError("text input must carry its content as a string")
        return self


class LanguagePayload(CamelModel):
    language: str = Field(default="English", min_length=1, max_length=60)


class RecruiterAnalysisPayload(LanguagePayload):
    job_input: AnalysisInput
    resume_input: AnalysisInput


class PreliminaryDecisionPayload(LanguagePayload):
    analysis_result: dict[str, Any]


class InterviewConsistencyPayload(LanguagePayload):
    job_input: AnalysisInput
    resume_input: AnalysisInput
    interview_transcript: str
    compatibility_gaps: list[str] = Field(default_factory=list)


class ResumeRewritePayload(LanguagePayload):
    job_input: AnalysisInput
    resume_input: AnalysisInput


class GenerateRequest(BaseModel):
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)
