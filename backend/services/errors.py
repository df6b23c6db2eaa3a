"""Error taxonomy for the analysis pipeline.

Every failure leaves the pipeline as one of these. The public ``message`` is
what the client sees; internal detail is only ever logged.
"""
import re


class AnalysisError(Exception):
    status_code = 500
    message = "Failed to analyze contract. Please try again."

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(AnalysisError):
    status_code = 400
    message = "Contract text is required."


class ConfigurationError(AnalysisError):
    status_code = 500
    message = "Provider credential is not configured."


class RateLimited(AnalysisError):
    status_code = 429
    message = "Rate limit exceeded. Please try again later or check your API quota."


class ProviderError(AnalysisError):
    status_code = 500
    message = "Failed to analyze contract. Please try again."


class MalformedOutput(AnalysisError):
    status_code = 500
    message = "Failed to parse analysis results."


RATE_LIMIT_PATTERN = re.compile(
    r"429|rate[ _-]?limit|quota|resource_exhausted|too many requests",
    re.IGNORECASE,
)


def extract_status_code(exc: BaseException):
    """Best-effort HTTP status from the assorted shapes SDK and transport errors take."""
    for attr in ("status_code", "status", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and value.isdigit():
            return int(value)

    response = getattr(exc, "response", None)
    if response is not None:
        value = getattr(response, "status_code", None)
        if isinstance(value, int):
            return value
    return None


def classify_provider_error(exc: BaseException) -> AnalysisError:
    """Map an opaque provider failure onto the taxonomy.

    Checks run in order: a 429 status, then a rate-limit/quota pattern in the
    message, else a generic provider error.
    """
    if isinstance(exc, AnalysisError):
        return exc

    status = extract_status_code(exc)
    message = str(exc)

    if status == 429:
        return RateLimited()
    if RATE_LIMIT_PATTERN.search(message):
        return RateLimited()
    return ProviderError()
