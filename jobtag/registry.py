"""Process-wide selection of the job id provider.

The first call probes the registered candidates in priority order and keeps
the first one that constructs. If none does, NullJobIdProvider is kept. The
choice is never revisited for the life of the process (short of reset()),
even if the framework behind it later goes away.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

from .errors import ProviderUnavailableError
from .logging_utils import get_json_logger
from .metrics import record_lookup, record_probe
from .providers.base import BaseJobIdProvider, NullJobIdProvider
from .providers.spark import SparkJobIdProvider

CandidateFactory = Callable[[], BaseJobIdProvider]

# highest priority first; NullJobIdProvider is implicit and always last
_candidates: list[CandidateFactory] = [SparkJobIdProvider]

_lock = threading.RLock()
_provider: BaseJobIdProvider | None = None


def _label(factory: CandidateFactory) -> str:
    name = getattr(factory, "name", None)
    if isinstance(name, str):
        return name
    return getattr(factory, "__name__", repr(factory))


def register_candidate(factory: CandidateFactory, *, priority: int | None = None) -> None:
    """Add a provider factory to the probe list.

    `priority` is the position in the list (0 is tried first); None appends.
    Only affects resolution that has not happened yet, see reset().
    """
    with _lock:
        if priority is None:
            _candidates.append(factory)
        else:
            _candidates.insert(priority, factory)


def _count(record: Callable[..., None], *args: Any, **kwargs: Any) -> None:
    # counters must never break a lookup
    try:
        record(*args, **kwargs)
    except Exception:  # noqa: BLE001
        return


def _resolve() -> BaseJobIdProvider:
    logger = get_json_logger("jobtag.registry", static_fields={"op": "resolve"})
    for factory in list(_candidates):
        label = _label(factory)
        try:
            provider = factory()
        except ProviderUnavailableError as e:
            error = str(e)
        except Exception as e:  # noqa: BLE001
            error = f"{type(e).__name__}: {e}"
        else:
            if isinstance(provider, BaseJobIdProvider):
                _count(record_probe, provider.name, available=True)
                logger.debug("job_id_provider_resolved", extra={"provider": provider.name})
                return provider
            error = f"factory returned {type(provider).__name__}, not a provider"
        _count(record_probe, label, available=False)
        logger.debug("job_id_provider_unavailable", extra={"provider": label, "error": error})

    logger.debug("job_id_provider_resolved", extra={"provider": NullJobIdProvider.name})
    return NullJobIdProvider()


def current_provider() -> BaseJobIdProvider:
    """Return the resolved provider, probing candidates on first use."""
    global _provider
    provider = _provider
    if provider is None:
        with _lock:
            if _provider is None:
                try:
                    _provider = _resolve()
                except Exception:  # noqa: BLE001
                    _provider = NullJobIdProvider()
            provider = _provider
    return provider


def get_job_id() -> str | None:
    """Provide an id for the job on whose behalf this process runs, if possible.

    Never raises. Returns None when no id can be determined.
    """
    provider = current_provider()
    try:
        job_id = provider.get_job_id()
    except Exception as e:  # noqa: BLE001
        logger = get_json_logger("jobtag.registry", static_fields={"op": "get_job_id"})
        logger.debug(
            "job_id_lookup_failed",
            extra={"provider": provider.name, "error": f"{type(e).__name__}: {e}"},
        )
        job_id = None
    _count(record_lookup, provider.name, job_id)
    return job_id


def reset() -> None:
    """Forget the resolved provider so the next call probes again."""
    global _provider
    with _lock:
        _provider = None
