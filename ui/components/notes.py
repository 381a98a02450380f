"""Notes section: creation form and the list of note cards."""

from __future__ import annotations

import logging

import streamlit as st

from notes.config import settings
from notes.kv import KeyValueStore, StorageError, create_key_value_store
from notes.rendering import MarkdownRenderer
from notes.storage import NoteStorage
from notes.view_model import NoteDraft, NotesViewModel

logger = logging.getLogger(__name__)


@st.cache_resource
def _backend() -> KeyValueStore:
    """Process-wide key-value backend, shared by all browser sessions."""
    return create_key_value_store(settings)


@st.cache_resource
def _renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def _ensure_view_model() -> NotesViewModel | None:
    """Create and load the session's view-model on first run."""
    if "notes_vm" not in st.session_state:
        vm = NotesViewModel(NoteStorage(_backend(), key=settings.notes_key))
        try:
            vm.initialize()
        except StorageError as e:
            logger.error("Loading notes failed: %s", e)
            st.error(f"Notes storage is unavailable: {e}")
            return None
        st.session_state.notes_vm = vm
    return st.session_state.notes_vm


def _render_form(vm: NotesViewModel) -> None:
    """Title and content inputs with Save / Cancel."""
    with st.form("new_note"):
        title = st.text_input("Title", value=vm.draft.title)
        content = st.text_area(
            "Content (Markdown supported)", value=vm.draft.content, height=150
        )
        col_save, col_cancel, _ = st.columns([1, 1, 4])
        with col_save:
            saved = st.form_submit_button("Save Note", type="primary")
        with col_cancel:
            cancelled = st.form_submit_button("Cancel")

    if cancelled:
        vm.cancel_compose()
        st.rerun()

    if saved:
        vm.draft = NoteDraft(title=title, content=content)
        missing = vm.draft.validate()
        if missing:
            st.warning(f"Please fill in: {', '.join(missing)}")
            return
        try:
            vm.submit(title, content)
        except StorageError as e:
            st.error(f"Could not save note: {e}")
            return
        st.rerun()


def _render_note_cards(vm: NotesViewModel) -> None:
    renderer = _renderer()
    for note in vm.notes:
        with st.container(border=True):
            col_title, col_delete = st.columns([6, 1])
            with col_title:
                st.subheader(note.title)
            with col_delete:
                if st.button("Delete", key=f"delete_{note.id}"):
                    try:
                        vm.delete(note.id)
                    except StorageError as e:
                        st.error(f"Could not delete note: {e}")
                    else:
                        st.rerun()
            # Raw HTML in the source is escaped by the renderer
            st.markdown(renderer.to_html(note.content), unsafe_allow_html=True)
            st.caption(note.date)


def render() -> None:
    """Render the notes section."""
    st.header("💬 Notes")

    vm = _ensure_view_model()
    if vm is None:
        return

    if vm.is_composing:
        _render_form(vm)
    elif st.button("➕ Add New Note", type="primary"):
        vm.begin_compose()
        st.rerun()

    _render_note_cards(vm)
