from __future__ import annotations

import importlib
from typing import Any, Callable

from ..config import SparkProbeConfig
from ..errors import ProviderUnavailableError
from ..logging_utils import get_json_logger
from ..metrics import record_lookup_error
from .base import BaseJobIdProvider


class SparkJobIdProvider(BaseJobIdProvider):
    """Job id from ``SparkContext.getOrCreate().applicationId``.

    Construction only checks that the Spark entry points exist. The process
    may still not be a Spark job, and old Spark builds may lack a working
    application id; get_job_id returns None in those cases.

    Spark assigns the application id itself but users can override it
    (``spark.app.id``), so it is not guaranteed to be unique.

    Note that calling getOrCreate starts a SparkContext if none is active.
    """

    name = "spark"

    def __init__(self, config: SparkProbeConfig | None = None) -> None:
        self.cfg = config or SparkProbeConfig()
        try:
            module = importlib.import_module(self.cfg.module)
        except ImportError as e:
            raise ProviderUnavailableError(self.name, f"{self.cfg.module} import failed: {e}") from e

        context_cls = getattr(module, self.cfg.context_class, None)
        if context_cls is None:
            raise ProviderUnavailableError(
                self.name, f"{self.cfg.module}.{self.cfg.context_class} not found"
            )
        get_or_create = getattr(context_cls, self.cfg.context_accessor, None)
        if not callable(get_or_create):
            raise ProviderUnavailableError(
                self.name, f"{self.cfg.context_class}.{self.cfg.context_accessor} not callable"
            )
        if not hasattr(context_cls, self.cfg.id_accessor):
            raise ProviderUnavailableError(
                self.name, f"{self.cfg.context_class}.{self.cfg.id_accessor} not found"
            )

        self._get_or_create: Callable[[], Any] = get_or_create
        self._id_accessor = self.cfg.id_accessor

    def get_job_id(self) -> str | None:
        try:
            context = self._get_or_create()
            if context is None:
                return self._absorb(f"{self.cfg.context_accessor} returned None")
            value = getattr(context, self._id_accessor)
            # property in pyspark, method in some builds
            if callable(value):
                value = value()
            if value is None or value == "":
                return None
            return str(value)
        except Exception as e:  # noqa: BLE001
            return self._absorb(f"{type(e).__name__}: {e}")

    def _absorb(self, error: str) -> None:
        try:
            record_lookup_error(self.name)
        except Exception:  # noqa: BLE001
            pass
        logger = get_json_logger("jobtag.providers", static_fields={"provider": self.name})
        logger.debug("job_id_lookup_failed", extra={"error": error})
        return None
