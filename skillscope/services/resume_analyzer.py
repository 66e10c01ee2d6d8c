from __future__ import annotations

import hashlib
import json
import logging
import time

from pydantic import ValidationError

from skillscope.ai.types import TextModel
from skillscope.schemas.analysis import AnalysisResult
from skillscope.services.json_recovery import recover_json

logger = logging.getLogger("skillscope.analyzer")

ANALYSIS_PROMPT = """
Analyze the resume text provided below. Based on the skills and experience, perform the following tasks:
1.  Identify the user's key skills.
2.  Suggest three relevant, in-demand job titles.
3.  For each job title, list the key required skills.
4.  Compare the user's skills with the job requirements to find the missing skills for each job.
5.  For each missing skill, recommend one specific online course from Coursera or Udemy, including the course name and a direct URL.

Return the output ONLY as a single, valid JSON object, enclosed in ```json ... ```. Do not include any introductory text or explanations outside of the JSON block.

The JSON structure must be:
{{
  "userSkills": ["Skill 1", "Skill 2"],
  "jobSuggestions": [
    {{
      "title": "Job Title 1",
      "requiredSkills": ["Skill A", "Skill B", "Skill C"],
      "missingSkills": [
        {{
          "skill": "Skill C",
          "recommendation": {{
            "course": "Course Name for Skill C",
            "url": "https://www.coursera.org/..."
          }}
        }}
      ]
    }}
  ]
}}

--- Resume Text ---
{resume_text}
"""


def build_analysis_prompt(resume_text: str) -> str:
    return ANALYSIS_PROMPT.format(resume_text=resume_text)


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _elapsed_ms(started_at: float) -> int:
    return int((time.perf_counter() - started_at) * 1000)


class ResumeAnalyzer:
    """Turns resume text into an :class:`AnalysisResult` through a text model.

    Every failure (model call, unparseable reply, wrong shape) is logged and
    reported as ``None``; nothing is raised to the caller.
    """

    def __init__(self, model: TextModel):
        self._model = model

    @property
    def model(self) -> TextModel:
        return self._model

    async def analyze(self, text: str) -> AnalysisResult | None:
        started_at = time.perf_counter()
        logger.info(
            json.dumps(
                {
                    "event": "resume_analysis_request",
                    "text_len": len(text),
                    "text_hash": _short_hash(text),
                }
            )
        )

        try:
            reply = await self._model.generate(build_analysis_prompt(text))
        except Exception as ex:  # noqa: BLE001 - provider failures map to an opaque analysis failure
            logger.exception(
                json.dumps(
                    {
                        "event": "resume_analysis_error",
                        "stage": "model_call",
                        "error": str(ex),
                        "duration_ms": _elapsed_ms(started_at),
                    }
                )
            )
            return None

        payload = recover_json(reply)
        if payload is None:
            logger.warning(
                json.dumps(
                    {
                        "event": "resume_analysis_error",
                        "stage": "json_recovery",
                        "reply_len": len(reply or ""),
                        "duration_ms": _elapsed_ms(started_at),
                    }
                )
            )
            return None

        try:
            result = AnalysisResult.model_validate(payload)
        except ValidationError as ex:
            logger.warning(
                json.dumps(
                    {
                        "event": "resume_analysis_error",
                        "stage": "schema",
                        "error_count": ex.error_count(),
                        "duration_ms": _elapsed_ms(started_at),
                    }
                )
            )
            return None

        logger.info(
            json.dumps(
                {
                    "event": "resume_analysis_complete",
                    "skills": len(result.user_skills),
                    "jobs": len(result.job_suggestions),
                    "duration_ms": _elapsed_ms(started_at),
                }
            )
        )
        return result
