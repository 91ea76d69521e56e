# topmark:header:start
#
#   project      : TabPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TabPrint test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
and provides small typed helpers shared by table tests.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tabprint.config import logging
from tabprint.table.printer import TablePrinter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tabprint.table.columns import ColumnSpec

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tabprint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TabPrint's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def render_table(
    columns: Iterable[ColumnSpec],
    *batches: tuple[list[object], bool],
    finish: bool = True,
) -> str:
    """Render ``batches`` of ``(rows, final_batch)`` with a fresh printer.

    Args:
        columns (Iterable[ColumnSpec]): Column descriptors or ``(name, label)`` pairs.
        *batches (tuple[list[object], bool]): Successive ``print_rows`` calls.
        finish (bool): Whether to call ``finish()`` at the end.

    Returns:
        str: Everything written to the sink.
    """
    sink = io.StringIO()
    printer = TablePrinter(columns, sink)
    for rows, final_batch in batches:
        printer.print_rows(rows, final_batch=final_batch)
    if finish:
        printer.finish()
    return sink.getvalue()
