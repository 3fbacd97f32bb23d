from __future__ import annotations

import logging
import sys
import types
from typing import Any, Callable

import pytest

from jobtag import registry


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(registry, "_candidates", list(registry._candidates))
    registry.reset()
    yield
    registry.reset()


def _clear_jobtag_loggers() -> None:
    for name in ("jobtag.registry", "jobtag.providers"):
        logger = logging.getLogger(name)
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def fresh_loggers():
    # handlers are built from env on first use, so each test starts clean
    _clear_jobtag_loggers()
    yield
    _clear_jobtag_loggers()


@pytest.fixture
def no_spark(monkeypatch: pytest.MonkeyPatch) -> None:
    # None in sys.modules makes the import raise ImportError even if pyspark is installed
    monkeypatch.setitem(sys.modules, "pyspark", None)


def _build_framework(
    app_id: Any = "job-42",
    *,
    id_style: str = "property",
    id_error: Exception | None = None,
    context_error: Exception | None = None,
    context_none: bool = False,
) -> types.ModuleType:
    calls = {"get_or_create": 0, "app_id": 0}

    def _read_id(self: Any) -> Any:
        calls["app_id"] += 1
        if id_error is not None:
            raise id_error
        return app_id

    namespace: dict[str, Any] = {}
    if id_style == "property":
        namespace["applicationId"] = property(_read_id)
    elif id_style == "method":
        namespace["applicationId"] = _read_id

    _StubSparkContext = type("SparkContext", (), namespace)
    _active: list[Any] = []

    def get_or_create() -> Any:
        calls["get_or_create"] += 1
        if context_error is not None:
            raise context_error
        if context_none:
            return None
        if not _active:
            _active.append(_StubSparkContext())
        return _active[0]

    _StubSparkContext.getOrCreate = staticmethod(get_or_create)

    module = types.ModuleType("pyspark")
    module.SparkContext = _StubSparkContext  # type: ignore[attr-defined]
    module.calls = calls  # type: ignore[attr-defined]
    return module


@pytest.fixture
def fake_spark(monkeypatch: pytest.MonkeyPatch) -> Callable[..., types.ModuleType]:
    """Install a stub pyspark module; keyword arguments shape its behaviour."""

    def install(*args: Any, **kwargs: Any) -> types.ModuleType:
        module = _build_framework(*args, **kwargs)
        monkeypatch.setitem(sys.modules, "pyspark", module)
        return module

    return install
