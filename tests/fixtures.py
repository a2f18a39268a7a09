"""Sample model outputs and a recording model client shared by the tests."""

import json

SECTION = {
    "items": [
        {"item": "Python services", "status": "Match", "explanation": "Five years of backend Python."},
        {"item": "Kubernetes", "status": "Partial", "explanation": "Used it, never operated it."},
    ],
    "score": 72,
}

RECRUITER_ANALYSIS = {
    "jobTitle": "Senior Backend Engineer",
    "summary": "Strong backend profile with limited platform exposure.",
    "keyResponsibilitiesMatch": SECTION,
    "requiredSkillsMatch": SECTION,
    "niceToHaveSkillsMatch": {"items": [], "score": 40},
    "companyCultureFit": {"analysis": "Prefers small teams.", "score": 65},
    "salaryAndBenefits": "Not stated in the job description.",
    "redFlags": ["Two short tenures"],
    "interviewQuestions": ["How did you run the payments migration?"],
    "overallFitScore": 78,
    "fitExplanation": "Covers the core stack, thin on operations.",
    "compatibilityGaps": ["No Go experience", "No on-call ownership"],
}

PRELIMINARY_DECISION = {
    "decision": "Recommended for Interview",
    "pros": ["Relevant backend depth"],
    "cons": ["No Go experience"],
    "explanation": "Worth a technical screen.",
}

CONSISTENCY_ANALYSIS = {
    "consistencyScore": 81,
    "summary": "Interview confirms most resume claims.",
    "recommendation": "Strong Fit",
    "softSkillsAnalysis": {"items": "Clear communicator.", "score": 80},
    "inconsistencies": {"items": ["Team size differs"], "score": 70},
    "missingFromInterview": {"items": [], "score": 90},
    "newInInterview": {"items": ["Mentored two juniors"], "score": 85},
    "gapResolutions": {
        "items": [
            {"gap": "No Go experience", "resolution": "Built a CLI in Go last year.", "isResolved": True},
        ],
        "score": 75,
    },
    "prosForHiring": ["Owns outcomes"],
    "consForHiring": ["Limited on-call"],
    "updatedOverallFitScore": 84,
    "hiringDecision": "Recommended for Hire",
}

REWRITTEN_RESUME = {"rewrittenResume": "Jane Doe\n\n## Experience\n- 5 years backend"}

JOB_INPUT = {"content": "Backend engineer, Go, 3 yrs", "format": "text"}
RESUME_INPUT = {"content": "Jane Doe, 5 yrs backend", "format": "text"}

PAYLOADS = {
    "analyzeForRecruiter": {"jobInput": JOB_INPUT, "resumeInput": RESUME_INPUT, "language": "English"},
    "generatePreliminaryDecision": {"analysisResult": RECRUITER_ANALYSIS, "language": "English"},
    "analyzeInterviewConsistency": {
        "jobInput": JOB_INPUT,
        "resumeInput": RESUME_INPUT,
        "interviewTranscript": "Q: Go? A: I built a CLI in Go.",
        "compatibilityGaps": ["No Go experience", "No on-call ownership"],
        "language": "English",
    },
    "rewriteResumeForJob": {"jobInput": JOB_INPUT, "resumeInput": RESUME_INPUT, "language": "English"},
}

RESULTS = {
    "analyzeForRecruiter": RECRUITER_ANALYSIS,
    "generatePreliminaryDecision": PRELIMINARY_DECISION,
    "analyzeInterviewConsistency": CONSISTENCY_ANALYSIS,
    "rewriteResumeForJob": REWRITTEN_RESUME,
}


class StubModelClient:
    """Returns canned text and records every call it receives."""

    def __init__(self, text: str | None = None, *, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = []

    @classmethod
    def returning(cls, payload) -> "StubModelClient":
        return cls(json.dumps(payload))

    async def generate(self, *, fragments, schema_model):
        self.calls.append({"fragments": tuple(fragments), "schema_model": schema_model})
        if self.error is not None:
            raise self.error
        return self.text
