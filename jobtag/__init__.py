"""Best-effort job id lookup for tagging telemetry.

    from jobtag import get_job_id
    record["job_id"] = get_job_id()  # None outside a supported job framework
"""

from __future__ import annotations

from .errors import JobIdError, ProviderUnavailableError
from .registry import current_provider, get_job_id, register_candidate, reset

__all__ = [
    "JobIdError",
    "ProviderUnavailableError",
    "current_provider",
    "get_job_id",
    "register_candidate",
    "reset",
]
