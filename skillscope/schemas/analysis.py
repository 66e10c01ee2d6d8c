from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CourseRecommendation(_CamelModel):
    course: str
    url: str


class MissingSkill(_CamelModel):
    skill: str
    recommendation: CourseRecommendation


class JobSuggestion(_CamelModel):
    title: str
    required_skills: list[str]
    missing_skills: list[MissingSkill]


class AnalysisResult(_CamelModel):
    user_skills: list[str]
    job_suggestions: list[JobSuggestion]


class AnalyzeTextRequest(_CamelModel):
    resume_text: str | None = None


class AnalyzeResponse(BaseModel):
    analysis: AnalysisResult


class ErrorResponse(BaseModel):
    error: str
