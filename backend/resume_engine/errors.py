class ResumeAnalysisError(Exception):
    """Base class for errors raised by the analysis engine."""


class EmptyInputError(ResumeAnalysisError, ValueError):
    """No analysable text was supplied."""


class InsightProviderError(ResumeAnalysisError):
    """Remote insight provider failed; always recovered by the local generator."""


class ProviderUnavailableError(InsightProviderError):
    """Provider not configured, unreachable, or timed out."""


class MalformedProviderResponseError(InsightProviderError):
    """Provider answered, but not with the expected JSON object."""
