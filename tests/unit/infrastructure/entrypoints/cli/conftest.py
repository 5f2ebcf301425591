import re
from collections.abc import AsyncGenerator
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from contextlib import AbstractContextManager
from contextlib import asynccontextmanager
from contextlib import contextmanager
from typing import Any
from unittest import mock

import pytest
from typer.testing import CliRunner

from userservice.domain.ports.repositories.users import UserRepository

type DatabasePatcherFactory = Callable[[str], AbstractContextManager[mock.Mock]]
type DependencyPatcherFactory = Callable[..., AbstractContextManager[mock.Mock]]

type TextCleaner = Callable[[str], str]


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Force Rich/Typer to use a standard terminal width and no colors
    ONLY for CLI unit tests to ensure consistent output assertions.
    """
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CI", "true")


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """Prevent the CLI 'main' callback from re-configuring logging during tests."""
    with mock.patch("userservice.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()


@pytest.fixture
def target_path(request: pytest.FixtureRequest) -> str:
    if request.cls and hasattr(request.cls, "TARGET_PATH"):
        return request.cls.TARGET_PATH

    if hasattr(request.module, "TARGET_PATH"):
        return request.module.TARGET_PATH

    raise ValueError("Test class or module must define 'TARGET_PATH' to use auto-patching fixtures.")


# --- Patcher Factories ---


@pytest.fixture
def mock_get_db_factory() -> DatabasePatcherFactory:
    @contextmanager
    def _patcher(target_path: str) -> Iterator[mock.Mock]:
        session_mock = mock.Mock(name="db_session")

        @asynccontextmanager
        async def get_db() -> AsyncGenerator[mock.Mock]:
            yield session_mock

        with mock.patch(target_path, side_effect=get_db):
            yield session_mock

    return _patcher


@pytest.fixture
def mock_dependency_factory() -> DependencyPatcherFactory:
    @contextmanager
    def _patcher(target_path: str, return_value: Any) -> Iterator[mock.Mock]:
        with mock.patch(target_path, return_value=return_value):
            yield return_value

    return _patcher


# --- DB Mocks ---


@pytest.fixture
def mock_get_db(target_path: str, mock_get_db_factory: DatabasePatcherFactory) -> Iterable[mock.Mock]:
    with mock_get_db_factory(f"{target_path}.get_db") as mock_db:
        yield mock_db


@pytest.fixture
def mock_engine(target_path: str, mock_dependency_factory: DependencyPatcherFactory) -> Iterable[mock.Mock]:
    conn = mock.AsyncMock(name="connection")

    @asynccontextmanager
    async def begin() -> AsyncGenerator[mock.AsyncMock]:
        yield conn

    engine = mock.Mock(name="engine", connection=conn)
    engine.begin.side_effect = begin
    with mock_dependency_factory(f"{target_path}.get_engine", engine) as mock_eng:
        yield mock_eng


# --- Repository Mocks ---


@pytest.fixture
def mock_user_repository(
    target_path: str,
    mock_dependency_factory: DependencyPatcherFactory,
) -> Iterable[mock.AsyncMock]:
    repo = mock.AsyncMock(spec=UserRepository)
    with mock_dependency_factory(f"{target_path}.get_user_repository", repo) as mock_repo:
        yield mock_repo


# --- Helpers ---


@pytest.fixture
def clean_typer_text() -> TextCleaner:
    """
    Typer still draws its error boxes with a rich Console whatever the
    environment says, so strip the box characters and collapse whitespace.
    """

    def _cleaner(text: str) -> str:
        clean_text = re.sub(r"[│╭╰─╮╯]", "", text)
        return " ".join(clean_text.split())

    return _cleaner
