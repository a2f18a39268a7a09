from __future__ import annotations

import json
from typing import Any, Sequence

from app.ai.types import ContentFragment, TextFragment

_JSON_REQUIREMENT = "Your output must be in JSON and conform to the provided schema."

Prompt = tuple[ContentFragment, ...]


def build_recruiter_analysis_prompt(
    job: ContentFragment,
    resume: ContentFragment,
    language: str,
) -> Prompt:
    return (
        TextFragment(
            "You are an expert HR recruiter analyzing a resume against a job description. "
            f"{_JSON_REQUIREMENT} The analysis language should be: {language}."
        ),
        TextFragment("Job Description:"),
        job,
        TextFragment("Candidate's Resume:"),
        resume,
        TextFragment("Analyze the resume against the job description and provide a detailed analysis."),
    )


def _integral_floats_as_ints(value: Any) -> Any:
    # Browsers serialise 78.0 as 78; the embedded analysis follows suit.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def build_preliminary_decision_prompt(analysis_result: dict[str, Any], language: str) -> Prompt:
    # Key order of the analysis is kept so the prompt mirrors what the caller sent.
    serialized = json.dumps(_integral_floats_as_ints(analysis_result), indent=2, ensure_ascii=False)
    return (
        TextFragment(
            "Based on the following recruitment analysis, make a preliminary decision. "
            'The decision should be either "Recommended for Interview" or "Not Recommended". '
            "Provide pros, cons, and an explanation. "
            f"The response language must be {language}. "
            f"{_JSON_REQUIREMENT} Analysis: {serialized}"
        ),
    )


def _gap_list(gaps: Sequence[str]) -> str:
    return "- " + "\n- ".join(gaps)


def build_consistency_prompt(
    job: ContentFragment,
    resume: ContentFragment,
    interview_transcript: str,
    compatibility_gaps: Sequence[str],
    language: str,
) -> Prompt:
    return (
        TextFragment(
            "You are an expert HR analyst assessing consistency. "
            f"{_JSON_REQUIREMENT} The analysis language should be: {language}."
        ),
        TextFragment("Job Description:"),
        job,
        TextFragment("Candidate's Resume:"),
        resume,
        TextFragment(f"Interview Transcript:\n{interview_transcript}"),
        TextFragment(f"Previously identified compatibility gaps:\n{_gap_list(compatibility_gaps)}"),
        TextFragment("Analyze the interview transcript."),
    )


def build_resume_rewrite_prompt(
    job: ContentFragment,
    resume: ContentFragment,
    language: str,
) -> Prompt:
    # The resume goes first here: it is the document being rewritten.
    return (
        TextFragment(
            "You are an expert resume writer. Rewrite a resume to better align with a specific job "
            "description, without fabricating information. Use Markdown formatting. "
            f"The output language should be: {language}. {_JSON_REQUIREMENT}"
        ),
        TextFragment("Original Resume:"),
        resume,
        TextFragment("Target Job Description:"),
        job,
        TextFragment("Rewrite the resume."),
    )
