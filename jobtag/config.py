from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, field_validator


class SparkProbeConfig(BaseModel):
    """Names probed when looking for the Spark framework.

    Defaults match pyspark: ``SparkContext.getOrCreate()`` returns the active
    context and ``applicationId`` is a property on it.
    """

    module: str = "pyspark"
    context_class: str = "SparkContext"
    context_accessor: str = "getOrCreate"
    id_accessor: str = "applicationId"


class JobIdSettings(BaseModel):
    """Runtime settings for jobtag's own logging.

    Values default from environment variables.
    """

    log_level: str = Field(
        default_factory=lambda: os.getenv("JOBTAG_LOG_LEVEL", "INFO"), validate_default=True
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        name = v.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)
