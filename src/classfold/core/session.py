"""Per-editor folding session.

A :class:`FoldSession` owns the configuration snapshot and the outcome of the
latest scan of the active editor. Hosts call into it from their change
notifications (active editor, selection, configuration) and from the toggle
command; every notification triggers a full rescan.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from classfold.core.classifier import Classification, classify
from classfold.core.formatter import format_class_names
from classfold.core.matcher import scan
from classfold.core.ports.configuration import ConfigurationStore
from classfold.core.ports.editor import TextEditor
from classfold.core.ports.renderer import DecorationRenderer
from classfold.core.settings import (
    FoldSettings,
    SettingKey,
    is_relevant_key,
    load_settings,
    word_wrap_column,
)
from classfold.models import Position

logger = logging.getLogger(__name__)


class FoldSession:
    def __init__(self, store: ConfigurationStore, renderer: DecorationRenderer) -> None:
        self._store = store
        self._renderer = renderer
        self.settings = FoldSettings()
        self.word_wrap_column: int | None = None
        self.active_editor: TextEditor | None = None
        self.last_result: Classification | None = None
        self.scan_count = 0

    @property
    def auto_fold(self) -> bool:
        return self.settings.auto_fold

    def load_config(self) -> None:
        self.settings = load_settings(self._store)
        self.word_wrap_column = word_wrap_column(self._store)
        logger.info(
            "Loaded settings: auto_fold=%s style=%s languages=%s",
            self.settings.auto_fold,
            self.settings.fold_style.value,
            ",".join(self.settings.supported_languages) or "-",
        )
        self.update_decorations()

    def set_active_editor(self, editor: TextEditor | None) -> None:
        if editor is None:
            return
        self.active_editor = editor
        self.last_result = None
        self.update_decorations()

    def on_selection_changed(self) -> None:
        self.update_decorations()

    def on_configuration_changed(self, affected_keys: Iterable[str] | None = None) -> None:
        if affected_keys is not None and not any(is_relevant_key(key) for key in affected_keys):
            return
        self.load_config()

    def toggle_auto_fold(self) -> bool:
        self.settings = self.settings.model_copy(update={"auto_fold": not self.settings.auto_fold})
        self._store.set(SettingKey.AUTO_FOLD.value, self.settings.auto_fold)
        self.update_decorations()
        logger.info("Auto fold %s", "enabled" if self.settings.auto_fold else "disabled")
        return self.settings.auto_fold

    def update_decorations(self) -> Classification | None:
        editor = self.active_editor
        if editor is None:
            return None
        document = editor.document
        if not self.settings.supports(document.language_id):
            logger.debug("Skipping scan: language %r is not enabled", document.language_id)
            self.last_result = None
            return None

        spans = scan(document, self.settings.match_group_mode)
        result = classify(spans, self.settings, list(editor.selections), self.word_wrap_column)
        self.last_result = result
        self.scan_count += 1
        logger.debug(
            "Scan #%d: %d folded, %d faded, %d unfolded",
            self.scan_count,
            len(result.folded),
            len(result.faded),
            len(result.unfolded),
        )

        self._renderer.set_decorations(
            [span.range for span in result.unfolded],
            [span.range for span in result.faded],
            [span.range for span in result.folded],
        )
        return result

    def hover_text(self, position: Position) -> str | None:
        if self.last_result is None:
            return None
        return self.last_result.index.lookup(position)

    def preview(self, position: Position) -> str | None:
        text = self.hover_text(position)
        if not text:
            return None
        return format_class_names(text)
