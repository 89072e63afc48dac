"""Shared fixtures and helpers for tests."""

from typing import Any

import pytest

from classfold.core.session import FoldSession
from classfold.core.settings import SettingKey
from classfold.editor import InMemoryConfigurationStore, InMemoryEditor, TextBuffer
from classfold.render import RecordingRenderer


# ---------------------------------------------------------------------------
# Auto-marker: every test under tests/ is a fast unit test
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

HTML_DOCUMENT = (
    '<div className="flex items-center justify-between p-4">\n'
    '  <span class="text-sm">hi</span>\n'
    "</div>\n"
)


def make_settings(**overrides: Any) -> dict[str, Any]:
    values: dict[str, Any] = {
        SettingKey.AUTO_FOLD.value: True,
        SettingKey.UNFOLD_IF_LINE_SELECTED.value: False,
        SettingKey.SUPPORTED_LANGUAGES.value: ["html", "javascriptreact", "typescriptreact"],
        SettingKey.FOLD_STYLE.value: "ALL",
        SettingKey.FOLD_LENGTH_THRESHOLD.value: 0,
        SettingKey.FOLD_MAX_LENGTH.value: 0,
    }
    values.update(overrides)
    return values


@pytest.fixture
def store() -> InMemoryConfigurationStore:
    return InMemoryConfigurationStore(make_settings())


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def html_editor() -> InMemoryEditor:
    return InMemoryEditor(TextBuffer(HTML_DOCUMENT, "html"))


@pytest.fixture
def session(store: InMemoryConfigurationStore, renderer: RecordingRenderer) -> FoldSession:
    fold_session = FoldSession(store, renderer)
    fold_session.load_config()
    return fold_session
