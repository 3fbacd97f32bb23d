from __future__ import annotations


class JobIdError(Exception):
    """Base class for jobtag errors."""


class ProviderUnavailableError(JobIdError):
    """Raised by a provider constructor when its framework cannot be located.

    The selector treats this as "framework not present" and moves on to the
    next candidate.
    """

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason
