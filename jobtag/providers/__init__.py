from .base import BaseJobIdProvider, NullJobIdProvider
from .spark import SparkJobIdProvider

__all__ = ["BaseJobIdProvider", "NullJobIdProvider", "SparkJobIdProvider"]
