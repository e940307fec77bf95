"""
Analysis Request Service

One analysis is one round trip:
1. Validate the request (resume text and role are required)
2. Build the prompt and make a single chat-completion call
3. Normalize the completion into an AnalysisResult
"""

import logging
from typing import Optional

import config
from exceptions import MissingFieldError, ServiceError
from schemas import AnalysisRequest, AnalysisResult
from analysis.llm_openai import request_chat_completion
from analysis.normalize import parse_analysis
from analysis.prompts import build_prompt

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing resume text or role"


def validate_request(request: AnalysisRequest) -> None:
    """Raise MissingFieldError unless resumeText and role are non-blank."""
    if not (request.resumeText or "").strip() or not (request.role or "").strip():
        raise MissingFieldError(MISSING_FIELDS_MESSAGE)


class AnalysisService:
    """Stateless wrapper around the LLM provider; safe to share between requests."""

    def __init__(
        self,
        api_key: Optional[str] = config.OPENAI_API_KEY,
        model: str = config.OPENAI_MODEL,
        base_url: str = config.OPENAI_BASE_URL,
        temperature: float = config.LLM_TEMPERATURE,
        max_tokens: int = config.LLM_MAX_TOKENS,
        timeout: float = config.LLM_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self.base_url = base_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Obtain a critique for one resume.

        Raises:
            MissingFieldError: resume text or role missing (no outbound call)
            ServiceError: credential missing or the provider call failed
            MalformedResponseError: the completion is not a valid analysis
        """
        validate_request(request)
        if not self.configured:
            raise ServiceError("LLM provider credential is not configured")

        prompt = build_prompt(request.role, request.company or "", request.resumeText)
        logger.info(
            f"Requesting analysis: model={self.model}, role={request.role!r}, "
            f"resume_chars={len(request.resumeText)}"
        )
        content = request_chat_completion(
            prompt,
            api_key=self._api_key,
            model=self.model,
            base_url=self.base_url,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout=self.timeout,
        )
        result = parse_analysis(content)
        logger.info(f"Analysis complete: matchScore={result.matchScore}")
        return result
