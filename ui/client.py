import logging
from typing import Optional

import requests
from pydantic import ValidationError

import config
from exceptions import MalformedResponseError, MissingFieldError, ServiceError
from parsers.extract import DocumentExtractor
from schemas import AnalysisResult

logger = logging.getLogger(__name__)


def submit_analysis(
    file_name: Optional[str],
    data: Optional[bytes],
    role: str,
    company: str = "",
    api_url: str = config.API_URL,
    extractor: Optional[DocumentExtractor] = None,
    timeout: float = 90,
) -> AnalysisResult:
    """
    Extract the resume locally, then ask the API for an analysis.

    Extraction errors surface before anything is sent over the network.
    """
    if not file_name or data is None or not (role or "").strip():
        raise MissingFieldError("Please upload a resume and enter a role.")

    extractor = extractor or DocumentExtractor(pdf_engine=config.PDF_ENGINE)
    resume_text = extractor.extract_text(file_name, data)

    body = {"resumeText": resume_text.strip(), "role": role, "company": company or ""}
    try:
        r = requests.post(f"{api_url.rstrip('/')}/api/analyze", json=body, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise ServiceError(f"Connection error: {e}") from e

    if not r.ok:
        raise ServiceError(f"Server error: {r.text}", status_code=r.status_code)

    try:
        return AnalysisResult.model_validate(r.json())
    except (ValueError, ValidationError) as e:
        logger.error(f"Unexpected analysis payload: {e}")
        raise MalformedResponseError("Server returned an unexpected analysis payload") from e
