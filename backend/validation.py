"""
validation.py - Request schemas (pydantic) and the validate_request helper
"""

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from catalog import DEFAULT_CARD_COUNT, INTERVIEW_ROLES, MAX_CARD_COUNT
from errors import validation_failed

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")
PHONE_RE = re.compile(r"^\+?[\d\s-]{10,20}$")

ExperienceLevel = Literal["0-1", "1-3", "3-5", "5+"]
InterviewType = Literal["technical", "hr", "behavioral"]
InterviewMode = Literal["interview", "practice"]
InterviewDuration = Literal["15", "30"]


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


def _check_email(value):
    if len(value) > 255:
        raise ValueError("Email too long")
    if not EMAIL_RE.match(value):
        raise ValueError("Invalid email format")
    return value.lower()


# ==================== AUTH ====================

class SignUpRequest(RequestModel):
    email: str
    password: str = Field(min_length=8, max_length=100)
    name: str = Field(min_length=2, max_length=100)
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_format(cls, v):
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v):
        if not PASSWORD_RE.match(v):
            raise ValueError("Password must contain at least one uppercase letter, "
                             "one lowercase letter, and one number")
        return v

    @field_validator("phone")
    @classmethod
    def phone_format(cls, v):
        if not v:
            return None
        if not PHONE_RE.match(v):
            raise ValueError("Invalid phone number format")
        return v


class SignInRequest(RequestModel):
    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def email_format(cls, v):
        return _check_email(v)


class ProfileUpdateRequest(RequestModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    phone: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl", max_length=2000)

    @field_validator("phone")
    @classmethod
    def phone_format(cls, v):
        if not v:
            return None
        if not PHONE_RE.match(v):
            raise ValueError("Invalid phone number format")
        return v


# ==================== INTERVIEW ====================

class CreateInterviewRequest(RequestModel):
    role: str
    experience_level: ExperienceLevel = Field(alias="experienceLevel")
    interview_type: InterviewType = Field(alias="interviewType")
    mode: InterviewMode = "interview"
    duration: InterviewDuration = "15"
    tech_stack: List[str] = Field(default_factory=list, alias="techStack", max_length=10)
    topics: List[str] = Field(default_factory=list, max_length=10)
    custom_questions: Optional[List[dict]] = Field(default=None, alias="customQuestions",
                                                   max_length=50)

    @field_validator("role")
    @classmethod
    def known_role(cls, v):
        if v not in INTERVIEW_ROLES:
            raise ValueError("Invalid role")
        return v

    @field_validator("tech_stack")
    @classmethod
    def tech_stack_items(cls, v):
        if any(len(item) > 50 for item in v):
            raise ValueError("Tech stack items must be at most 50 characters")
        return [item for item in v if item]

    @field_validator("topics")
    @classmethod
    def topic_items(cls, v):
        if any(len(item) > 100 for item in v):
            raise ValueError("Topics must be at most 100 characters")
        return [item for item in v if item]


class InterviewRefRequest(RequestModel):
    interview_id: str = Field(alias="interviewId", min_length=1, max_length=36)


class EvaluateAnswerRequest(InterviewRefRequest):
    question_index: int = Field(alias="questionIndex", ge=0, le=100)
    question_text: str = Field(alias="questionText", min_length=1, max_length=5000)
    user_answer: str = Field(default="", alias="userAnswer", max_length=50000)
    speaking_time: Optional[float] = Field(default=None, alias="speakingTime", ge=0)


# ==================== STUDY TOOLS ====================

class GenerateFlashCardsRequest(RequestModel):
    technology: str = Field(min_length=1, max_length=100)
    topic: str = Field(min_length=1, max_length=100)
    count: int = Field(default=DEFAULT_CARD_COUNT, ge=1, le=MAX_CARD_COUNT)


class GenerateProjectsRequest(RequestModel):
    technology: str = Field(min_length=1, max_length=100)
    domain: str = Field(min_length=1, max_length=100)


# ==================== VALIDATION HELPER ====================

def validate_request(schema, data):
    """Parse `data` with `schema`, raising a VAL_001 ApiError listing every issue."""
    try:
        return schema.model_validate(data if data is not None else {})
    except ValidationError as e:
        issues = [
            {"path": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise validation_failed(issues) from e
