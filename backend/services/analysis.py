"""Contract analysis pipeline.

validate_request -> compose_prompt -> invoke_model -> validate_result, run
once per request with no retries. Every failure leaves as an AnalysisError.
"""
import json
import logging

from pydantic import ValidationError

import config
from prompts.scope import SCOPE_ANALYSIS_PROMPT
from schemas.analysis import AnalysisRequest, AnalysisPrompt, AnalysisResult, label_for_score
from services import llm
from services.errors import AnalysisError, InvalidInput, MalformedOutput, ProviderError

logger = logging.getLogger(__name__)

REQUEST_ERROR_MESSAGES = {
    "missing": "Contract text is required.",
    "string_type": "Contract text must be a string.",
}


def validate_request(payload) -> AnalysisRequest:
    if not isinstance(payload, dict):
        raise InvalidInput("Request body must be a JSON object.")
    try:
        return AnalysisRequest.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        raise InvalidInput(REQUEST_ERROR_MESSAGES.get(first["type"], first["msg"])) from e


def compose_prompt(text: str) -> AnalysisPrompt:
    return AnalysisPrompt(system=SCOPE_ANALYSIS_PROMPT, user=text)


def validate_result(raw: str) -> AnalysisResult:
    """Parse and strictly validate raw model output. Nothing is repaired."""
    try:
        parsed = json.loads(llm.clean_llm_response(raw))
    # JSONDecodeError is a ValueError; so are oversized integer literals.
    # Very deep nesting exhausts the decoder's recursion.
    except (ValueError, RecursionError) as e:
        logger.warning("Model output is not valid JSON: %s", type(e).__name__)
        raise MalformedOutput() from e

    try:
        result = AnalysisResult.model_validate(parsed)
    except ValidationError as e:
        logger.warning("Model output failed schema validation: %s", e.errors(include_url=False))
        raise MalformedOutput() from e

    if config.STRICT_LABEL_BANDING and result.label != label_for_score(result.score):
        logger.warning(
            "Model label %r does not match score %d (expected %r)",
            result.label, result.score, label_for_score(result.score),
        )
        raise MalformedOutput()

    return result


def analyze_contract(payload) -> AnalysisResult:
    """Run the full analysis pipeline for one request payload."""
    request = validate_request(payload)
    try:
        prompt = compose_prompt(request.text)
        raw = llm.invoke_model(prompt)
        result = validate_result(raw)
    except AnalysisError:
        raise
    except Exception as e:
        logger.exception("Unexpected failure in analysis pipeline")
        raise ProviderError() from e

    logger.info(
        "Analyzed contract (%d chars): score=%d label=%s flags=%d",
        len(request.text), result.score, result.label, len(result.flags),
    )
    return result
