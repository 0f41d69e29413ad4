"""
Error taxonomy for the Change Enablement Agent.

Every error here is a caller-contract violation: it is fixed by changing the
call, never retried.
"""


class ChangeEnablementError(Exception):
    """Base class for all change enablement errors."""


class PreconditionError(ChangeEnablementError, ValueError):
    """A decision function was called with arguments outside its contract."""


class IncompleteInputError(ChangeEnablementError, ValueError):
    """A required form choice was not provided before classification."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required choice(s): {', '.join(missing)}")


class PolicyError(ChangeEnablementError):
    """The change policy file is missing or malformed."""
