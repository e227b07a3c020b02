"""
Custom exceptions for the LLM client layer.

These are the raw failures of a single provider call. The error classifier
turns them into an ErrorKind; nothing above the classifier inspects them.
"""


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.

    All client-level exceptions inherit from this to allow catching
    any provider failure with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMRequestError(LLMClientError):
    """
    Raised when the provider call fails (HTTP error status, network error,
    undecodable body).

    The message keeps the backend's own wording, e.g.
    "[429 Too Many Requests] {...RESOURCE_EXHAUSTED...}", because backends
    expose no typed errors and the classifier has nothing else to go on.
    """
    def __init__(self, message: str, status_code: int | None = None, details: dict | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class LLMTimeoutError(LLMClientError):
    """
    Raised when the local attempt timer fires before the provider answers.

    Classified structurally (by type), never by its message. The underlying
    HTTP call is not cancelled and may still complete in the background.
    """
    def __init__(self, timeout: float, details: dict | None = None):
        super().__init__(f"Request timeout after {timeout:g}s", details)
        self.timeout = timeout


class LLMEmptyResponseError(LLMClientError):
    """
    Raised when the provider answers with a structurally valid but blank body.
    """
    pass
