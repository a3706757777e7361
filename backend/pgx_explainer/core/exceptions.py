"""
Failure taxonomy for the explanation requester.

None of these escape generate_explanation(); they are carried inside an
ExplanationResult and only used to pick the fallback and label the warning.
"""


class ExplanationRequestError(Exception):
    """The LLM explanation request could not produce a usable explanation."""


class TransportError(ExplanationRequestError):
    """Network failure, timeout, or non-success status from the LLM service."""


class MalformedResponseError(ExplanationRequestError):
    """The LLM service answered, but the body is not the expected JSON object."""


class IncompleteResponseError(ExplanationRequestError):
    """Valid JSON, but summary or mechanism is missing or empty."""
