from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator
from typing import List, Optional


# Incoming analysis request (field names match the JSON wire format)
class AnalysisRequest(BaseModel):
    resumeText: Optional[str] = None
    role: Optional[str] = None
    company: Optional[str] = ""

    @field_validator("company", mode="before")
    @classmethod
    def _null_company(cls, value):
        return "" if value is None else value


# Normalized critique returned by the model
class AnalysisResult(BaseModel):
    matchScore: StrictInt
    strengths: List[StrictStr] = Field(default_factory=list)
    weaknesses: List[StrictStr] = Field(default_factory=list)
    suggestions: List[StrictStr] = Field(default_factory=list)
    tailoredBullets: List[StrictStr] = Field(default_factory=list)
    notes: StrictStr = ""

    @field_validator("matchScore", mode="before")
    @classmethod
    def _integral_score(cls, value):
        # 82.0 is accepted as 82; 82.5 and booleans are still rejected
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("strengths", "weaknesses", "suggestions", "tailoredBullets", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("notes", mode="before")
    @classmethod
    def _null_notes(cls, value):
        return "" if value is None else value


# Body of every non-200 API response
class ErrorResponse(BaseModel):
    error: str


class HealthOut(BaseModel):
    status: str
    model: str
