"""Async HTTP client for ``POST /api/generate``.

Each method sends one ``{type, payload}`` envelope and returns the decoded
JSON result. There are no retries and no timeout beyond httpx's default.
"""

from __future__ import annotations

from typing import Any, Sequence

import httpx

GENERATE_PATH = "/api/generate"


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


def text_input(content: str) -> dict[str, Any]:
    return {"content": content, "format": "text"}


def file_input(data: str, mime_type: str) -> dict[str, Any]:
    """Uploaded document; ``data`` is the base64-encoded file body."""
    return {"content": {"data": data, "mimeType": mime_type}, "format": "file"}


class AnalysisApiClient:
    def __init__(
        self,
        base_url: str = "",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> "AnalysisApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _post(self, type_: str, payload: dict[str, Any]) -> Any:
        response = await self._http.post(GENERATE_PATH, json={"type": type_, "payload": payload})
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {"message": "An unknown API error occurred."}
            message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(
                message or f"API request failed with status {response.status_code}",
                response.status_code,
            )
        return response.json()

    async def analyze_for_recruiter(
        self,
        job_input: dict[str, Any],
        resume_input: dict[str, Any],
        language: str,
    ) -> dict[str, Any]:
        return await self._post(
            "analyzeForRecruiter",
            {"jobInput": job_input, "resumeInput": resume_input, "language": language},
        )

    async def generate_preliminary_decision(
        self,
        analysis_result: dict[str, Any],
        language: str,
    ) -> dict[str, Any]:
        return await self._post(
            "generatePreliminaryDecision",
            {"analysisResult": analysis_result, "language": language},
        )

    async def analyze_interview_consistency(
        self,
        job_input: dict[str, Any],
        resume_input: dict[str, Any],
        interview_transcript: str,
        compatibility_gaps: Sequence[str],
        language: str,
    ) -> dict[str, Any]:
        return await self._post(
            "analyzeInterviewConsistency",
            {
                "jobInput": job_input,
                "resumeInput": resume_input,
                "interviewTranscript": interview_transcript,
                "compatibilityGaps": list(compatibility_gaps),
                "language": language,
            },
        )

    async def rewrite_resume_for_job(
        self,
        job_input: dict[str, Any],
        resume_input: dict[str, Any],
        language: str,
    ) -> dict[str, Any]:
        return await self._post(
            "rewriteResumeForJob",
            {"jobInput": job_input, "resumeInput": resume_input, "language": language},
        )
