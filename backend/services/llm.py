import json
import logging
import threading

from openai import OpenAI

import config
from schemas.analysis import AnalysisPrompt
from services.errors import ConfigurationError, ProviderError, classify_provider_error, extract_status_code
from services.mock import mock_scope_analysis

logger = logging.getLogger(__name__)


# Lazy client initialization, rebuilt if the credential changes
_client = None
_client_key = None
_client_lock = threading.Lock()


def get_client():
    global _client, _client_key
    api_key = config.get_api_key()
    if not api_key:
        raise ConfigurationError()
    with _client_lock:
        client = _client
        if client is None or _client_key != api_key:
            # One attempt per request: the SDK's own retries are switched off
            client = OpenAI(api_key=api_key, max_retries=0)
            _client, _client_key = client, api_key
    return client


def clean_llm_response(response_text: str) -> str:
    """Clean up potential markdown formatting from LLM JSON responses.

    Handles the common pattern where LLMs wrap JSON in ```json``` code blocks.
    """
    response_text = response_text.strip()
    if response_text.startswith("```"):
        response_text = response_text.split("```")[1]
        if response_text.startswith("json"):
            response_text = response_text[4:]
    return response_text.strip()


def invoke_model(prompt: AnalysisPrompt) -> str:
    """Send one prompt to the provider and return its raw text output.

    Raises ConfigurationError before any network call when no credential is
    set, RateLimited on provider quota signals and ProviderError otherwise.
    """
    if config.MOCK_MODE:
        return json.dumps(mock_scope_analysis(prompt.user))

    client = get_client()

    try:
        response = client.chat.completions.create(
            model=config.OPENAI_MODEL,
            temperature=config.ANALYSIS_TEMPERATURE,
            response_format={"type": "json_object"},
            messages=prompt.messages(),
        )
    except Exception as e:
        error = classify_provider_error(e)
        logger.error(
            "Provider call failed as %s (%s, status=%s): %s",
            type(error).__name__, type(e).__name__, extract_status_code(e), e,
        )
        raise error from e

    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        logger.error("Unexpected provider response shape: %r", response)
        raise ProviderError() from e

    if not content:
        logger.warning("Provider returned an empty completion")
        return ""
    return content
