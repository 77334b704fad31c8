"""Exception hierarchy for the reading coach pipeline.

Adapters raise only `TransportError` subclasses, result builders raise only
`SchemaViolationError`. The coach converts all of them into degraded results,
so none of these ever reach a caller of the public capabilities.
"""


class ReadingCoachError(Exception):
    """Base exception for reading coach errors"""  # noqa: D415


class MissingKeyError(ReadingCoachError):
    """Raised when no API key can be resolved for a call"""  # noqa: D415


class TransportError(ReadingCoachError):
    """Raised when the call to the model service fails"""  # noqa: D415


class NetworkError(TransportError):
    """Raised when the model service cannot be reached"""  # noqa: D415


class AuthError(TransportError):
    """Raised when the model service rejects the API key"""  # noqa: D415


class SchemaViolationError(ReadingCoachError):
    """Raised when the model output does not match the response contract"""  # noqa: D415
