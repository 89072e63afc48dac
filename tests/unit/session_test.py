"""Tests for the folding session."""

from classfold.core.session import FoldSession
from classfold.core.settings import SettingKey
from classfold.editor import InMemoryConfigurationStore, InMemoryEditor, TextBuffer
from classfold.models import Position, Range, Selection
from classfold.render import RecordingRenderer

# line 0: className value is 37 characters long, line 1: class value is 7
FIRST_ALL = Range.from_coordinates(0, 5, 0, 54)
SECOND_ALL = Range.from_coordinates(1, 8, 1, 23)
FIRST_QUOTED = Range.from_coordinates(0, 16, 0, 53)


class TestWithoutEditor:
    def test_update_is_noop(self, session: FoldSession, renderer: RecordingRenderer) -> None:
        assert session.update_decorations() is None
        assert renderer.call_count == 0

    def test_hover_is_none(self, session: FoldSession) -> None:
        assert session.hover_text(Position(line=0, character=0)) is None
        assert session.preview(Position(line=0, character=0)) is None

    def test_none_editor_is_ignored(
        self, session: FoldSession, renderer: RecordingRenderer, html_editor: InMemoryEditor
    ) -> None:
        session.set_active_editor(html_editor)
        session.set_active_editor(None)
        assert session.active_editor is html_editor
        assert renderer.call_count == 1


class TestUpdateDecorations:
    def test_folds_every_match(
        self, session: FoldSession, renderer: RecordingRenderer, html_editor: InMemoryEditor
    ) -> None:
        session.set_active_editor(html_editor)
        assert renderer.folded == [FIRST_ALL, SECOND_ALL]
        assert renderer.unfolded == []
        assert renderer.faded == []

    def test_unsupported_language_is_skipped(self, session: FoldSession, renderer: RecordingRenderer) -> None:
        session.set_active_editor(InMemoryEditor(TextBuffer('<div class="p-4">', "markdown")))
        assert renderer.call_count == 0
        assert session.last_result is None

    def test_threshold_and_cursor(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        renderer: RecordingRenderer,
        html_editor: InMemoryEditor,
    ) -> None:
        store.values[SettingKey.FOLD_LENGTH_THRESHOLD.value] = 20
        session.load_config()
        html_editor.move_cursor(0, 30)
        session.set_active_editor(html_editor)
        assert renderer.folded == []
        assert renderer.unfolded == [FIRST_ALL, SECOND_ALL]

        html_editor.move_cursor(2, 0)
        session.on_selection_changed()
        assert renderer.folded == [FIRST_ALL]
        assert renderer.unfolded == [SECOND_ALL]

    def test_quoted_style(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        renderer: RecordingRenderer,
        html_editor: InMemoryEditor,
    ) -> None:
        store.values[SettingKey.FOLD_STYLE.value] = "QUOTED"
        session.load_config()
        session.set_active_editor(html_editor)
        assert renderer.folded[0] == FIRST_QUOTED

    def test_word_wrap_from_store_fades(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        renderer: RecordingRenderer,
        html_editor: InMemoryEditor,
    ) -> None:
        store.values["editor.wordWrapColumn"] = 40
        session.load_config()
        session.set_active_editor(html_editor)
        assert renderer.faded == [FIRST_ALL]
        assert renderer.folded == [SECOND_ALL]

    def test_rescan_replaces_previous_result(self, session: FoldSession, html_editor: InMemoryEditor) -> None:
        session.set_active_editor(html_editor)
        other = InMemoryEditor(TextBuffer('<p class="m-0">', "html"))
        session.set_active_editor(other)
        assert session.last_result is not None
        assert len(session.last_result.index) == 1
        assert session.hover_text(Position(line=0, character=20)) is None


class TestToggle:
    def test_toggle_twice_restores_state(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        renderer: RecordingRenderer,
        html_editor: InMemoryEditor,
    ) -> None:
        session.set_active_editor(html_editor)
        calls_before = renderer.call_count
        original = session.auto_fold

        assert session.toggle_auto_fold() is (not original)
        assert renderer.folded == []
        assert session.toggle_auto_fold() is original

        assert renderer.call_count == calls_before + 2
        assert store.writes == [
            (SettingKey.AUTO_FOLD.value, not original),
            (SettingKey.AUTO_FOLD.value, original),
        ]

    def test_toggle_persists_before_rescanning(
        self, store: InMemoryConfigurationStore, html_editor: InMemoryEditor
    ) -> None:
        stored_at_render: list[object] = []

        class StoreReadingRenderer(RecordingRenderer):
            def set_decorations(self, unfolded, faded, folded) -> None:  # noqa: ANN001
                stored_at_render.append(store.values.get(SettingKey.AUTO_FOLD.value))
                super().set_decorations(unfolded, faded, folded)

        session = FoldSession(store, StoreReadingRenderer())
        session.load_config()
        session.set_active_editor(html_editor)
        stored_at_render.clear()

        session.toggle_auto_fold()
        assert stored_at_render == [False]

    def test_toggle_without_editor_still_persists(
        self, store: InMemoryConfigurationStore, session: FoldSession
    ) -> None:
        assert session.toggle_auto_fold() is False
        assert store.values[SettingKey.AUTO_FOLD.value] is False


class TestConfigurationChanged:
    def test_unrelated_keys_are_ignored(
        self, store: InMemoryConfigurationStore, session: FoldSession, html_editor: InMemoryEditor
    ) -> None:
        session.set_active_editor(html_editor)
        store.values[SettingKey.AUTO_FOLD.value] = False
        session.on_configuration_changed(["editor.fontSize"])
        assert session.auto_fold is True

    def test_relevant_keys_reload(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        renderer: RecordingRenderer,
        html_editor: InMemoryEditor,
    ) -> None:
        session.set_active_editor(html_editor)
        store.values[SettingKey.AUTO_FOLD.value] = False
        session.on_configuration_changed([SettingKey.AUTO_FOLD.value])
        assert session.auto_fold is False
        assert renderer.unfolded == [FIRST_ALL, SECOND_ALL]

    def test_unknown_keys_reload(self, store: InMemoryConfigurationStore, session: FoldSession) -> None:
        store.values[SettingKey.UNFOLD_IF_LINE_SELECTED.value] = True
        session.on_configuration_changed()
        assert session.settings.unfold_if_line_selected is True


class TestPreview:
    def test_hover_returns_raw_text(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        html_editor: InMemoryEditor,
    ) -> None:
        store.values[SettingKey.FOLD_STYLE.value] = "QUOTED"
        session.load_config()
        session.set_active_editor(html_editor)
        assert session.hover_text(Position(line=0, character=16)) == "flex items-center justify-between p-4"
        assert session.hover_text(Position(line=0, character=53)) == "flex items-center justify-between p-4"
        assert session.hover_text(Position(line=0, character=54)) is None

    def test_preview_is_formatted(
        self,
        store: InMemoryConfigurationStore,
        session: FoldSession,
        html_editor: InMemoryEditor,
    ) -> None:
        store.values[SettingKey.FOLD_STYLE.value] = "QUOTED"
        session.load_config()
        session.set_active_editor(html_editor)
        assert session.preview(Position(line=0, character=30)) == "flex\nitems-center justify-between\np-4\n"
        assert session.preview(Position(line=1, character=16)) == "text-sm\n"

    def test_unfolded_spans_have_no_preview(
        self,
        session: FoldSession,
        html_editor: InMemoryEditor,
    ) -> None:
        html_editor.select([Selection(start=Position(line=0, character=0), end=Position(line=2, character=0))])
        session.set_active_editor(html_editor)
        assert session.preview(Position(line=0, character=30)) is None
