import logging
import requests

import config
from exceptions import MalformedResponseError, ServiceError
from analysis.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


def provider_error_text(response: requests.Response, limit: int = config.MAX_ERROR_CHARS) -> str:
    """
    Error text to forward from a failed provider response.

    OpenAI-style bodies ({"error": {"message": ...}}) are reduced to the
    message; anything else is passed as raw text. Always cut to ``limit``.
    """
    text = response.text or ""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            text = err["message"]
        elif isinstance(err, str):
            text = err
    text = text.strip() or f"LLM provider returned status {response.status_code}"
    return text[:limit]


def request_chat_completion(
    prompt: str,
    api_key: str,
    model: str = config.OPENAI_MODEL,
    base_url: str = config.OPENAI_BASE_URL,
    temperature: float = config.LLM_TEMPERATURE,
    max_tokens: int = config.LLM_MAX_TOKENS,
    timeout: float = config.LLM_TIMEOUT,
) -> str:
    """Send one chat-completion request and return the completion text."""
    url = f"{base_url.rstrip('/')}/chat/completions"
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "temperature": temperature,
        "max_tokens": max_tokens,
    }

    try:
        response = requests.post(url, headers=headers, json=payload, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"LLM provider request failed: {e}")
        raise ServiceError(f"LLM provider request failed: {e}") from e

    if not response.ok:
        message = provider_error_text(response)
        logger.error(f"LLM provider error: status={response.status_code}, message={message[:200]}")
        raise ServiceError(message, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise MalformedResponseError("LLM provider returned a non-JSON body") from e

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None
    if content is not None and not isinstance(content, str):
        raise MalformedResponseError(
            f"LLM provider returned non-text content ({type(content).__name__})"
        )
    return content or "{}"
