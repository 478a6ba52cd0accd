"""Error types shared by the judgment adapter, the scoring pipeline and the API."""


class QueryValidationError(ValueError):
    """Caller-fixable input problem, reported before any judgment call."""


class ConfigurationError(ValueError):
    """The judgment source cannot be used because configuration is missing."""


class JudgmentSourceError(Exception):
    """The judgment source call itself failed."""


class JudgmentTransportError(JudgmentSourceError):
    """Connection, HTTP status or authentication failure talking to the model."""


class JudgmentTimeoutError(JudgmentSourceError):
    """The model did not answer within the configured timeout."""


class MalformedJudgmentError(JudgmentSourceError):
    """The model answered, but not with a readable judgment."""
