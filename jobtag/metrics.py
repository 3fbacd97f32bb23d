"""Prometheus counters for provider probing and job id lookups."""

from __future__ import annotations

from prometheus_client import Counter

PROBES_COUNTER = Counter(
    "jobtag_provider_probes_total",
    "Job id provider construction attempts",
    ["provider", "outcome"],
)
LOOKUPS_COUNTER = Counter(
    "jobtag_lookups_total", "Job id lookups through the public accessor", ["provider", "outcome"]
)
LOOKUP_ERRORS_COUNTER = Counter(
    "jobtag_lookup_errors_total", "Framework failures absorbed during lookup", ["provider"]
)


def record_probe(provider: str, available: bool) -> None:
    PROBES_COUNTER.labels(
        provider=provider, outcome="available" if available else "unavailable"
    ).inc()


def record_lookup(provider: str, job_id: str | None) -> None:
    LOOKUPS_COUNTER.labels(provider=provider, outcome="hit" if job_id is not None else "miss").inc()


def record_lookup_error(provider: str) -> None:
    LOOKUP_ERRORS_COUNTER.labels(provider=provider).inc()
