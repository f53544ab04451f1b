# =============================================================================
# core/errors.py  —  Failure taxonomy
# =============================================================================
#
# Every failure that should reach the caller as a protocol-level error is a
# KenallError.  "Not found" is deliberately absent: it is an ordinary
# successful answer (see NotFound in core/models.py).
# =============================================================================


class KenallError(Exception):
    """Base class for failures surfaced to the tool caller."""


class ConfigurationError(KenallError):
    """The API credential is missing.  Every call fails until it is set."""


class UnknownToolError(KenallError):
    """The invocation named a tool that is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(KenallError):
    """The argument mapping does not match the tool's input shape."""


class UpstreamError(KenallError):
    """Network or HTTP failure talking to the ken-all API."""
