"""
Exception hierarchy for the address checker.

Invalid formats and undeployed addresses are *results*, not errors:
they come back as a ClassificationResult. Only configuration problems
and exhausted node retries are raised.
"""

from __future__ import annotations


class CheckerError(Exception):
    """Base class for all errors raised by starknet_checker."""
    pass


class ConfigError(CheckerError):
    """Raised when the RPC endpoint is missing or is not a usable URL."""
    pass


class PipelineError(CheckerError):
    """Raised when a classification run is aborted before producing a result."""
    pass


class GatewayError(PipelineError):
    """
    Raised when a remote call failed on every retry attempt.

    Attributes:
        last_error: the exception raised by the final attempt
        attempts:   total number of attempts made (initial call included)
    """

    def __init__(self, message: str, last_error: BaseException | None = None, attempts: int = 0) -> None:
        super().__init__(message)
        self.last_error = last_error
        self.attempts = attempts
