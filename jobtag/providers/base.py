from __future__ import annotations

from abc import ABC, abstractmethod


class BaseJobIdProvider(ABC):
    """A way of finding the id of the job this process runs for.

    Constructors may raise ProviderUnavailableError when the framework they
    depend on is not loadable. Once constructed, get_job_id must not raise.
    """

    name: str = "base"

    @abstractmethod
    def get_job_id(self) -> str | None:
        """Return the current job id, or None when it cannot be determined."""
        raise NotImplementedError


class NullJobIdProvider(BaseJobIdProvider):
    """Used when no supported framework is present. Always returns None."""

    name = "null"

    def get_job_id(self) -> str | None:
        return None
