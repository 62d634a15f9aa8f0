"""Streamlit page: uploader, file list, merge and download.

Every rerun redraws the whole page from the session's ``MergeController``.
Widget callbacks receive the document id as an argument, so nothing is
registered globally.
"""
import logging

import streamlit as st

from minifusion.controller import BUSY_LABEL, MergeController

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "controller"
UPLOADER_KEY = "uploader_key"
NOTICE_REFRESH_SECONDS = 1.0


def row_label(index: int, doc) -> str:
    return f"{index + 1}. {doc.file_name}"


def pages_label(count: int) -> str:
    return f"{count} page" if count == 1 else f"{count} pages"


def get_controller(settings=None) -> MergeController:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = MergeController(settings)
    return st.session_state[CONTROLLER_KEY]


# ========= Callbacks =========
def _on_upload(widget_key):
    files = st.session_state.get(widget_key) or []
    if not files:
        return
    ctrl = st.session_state[CONTROLLER_KEY]
    added = ctrl.add_files(files)
    logger.info("Batch of %d file(s): %d accepted", len(files), len(added))
    # new key = fresh, empty uploader on the next run
    st.session_state[UPLOADER_KEY] += 1


def _on_remove(doc_id):
    st.session_state[CONTROLLER_KEY].remove(doc_id)


# ========= Sections =========
def render_uploader(ctrl: MergeController):
    st.session_state.setdefault(UPLOADER_KEY, 0)
    widget_key = f"uploader_{st.session_state[UPLOADER_KEY]}"
    limits = ctrl.limits
    st.file_uploader(
        f"Drop up to {limits.max_files} PDFs here or browse "
        f"(max {limits.max_pages_per_file} pages each)",
        accept_multiple_files=True,
        key=widget_key,
        on_change=_on_upload,
        args=(widget_key,),
    )


@st.fragment(run_every=NOTICE_REFRESH_SECONDS)
def render_notice():
    # redrawn every NOTICE_REFRESH_SECONDS, with or without user input
    notice = st.session_state[CONTROLLER_KEY].notices.current()
    if notice is not None:
        getattr(st, notice.level, st.warning)(notice.message)


def render_file_list(ctrl: MergeController):
    for i, doc in enumerate(ctrl.session):
        info, action = st.columns([0.88, 0.12])
        with info:
            st.markdown(f"**{row_label(i, doc)}**")
            st.caption(pages_label(doc.page_count))
        action.button(
            "✕",
            key=f"remove_{doc.doc_id}",
            help="Remove",
            on_click=_on_remove,
            args=(doc.doc_id,),
        )


def render_merge(ctrl: MergeController):
    slot = st.empty()
    clicked = slot.button(
        ctrl.merge_label,
        key="merge",
        type="primary",
        disabled=not ctrl.merge_enabled,
    )
    if clicked:
        slot.button(BUSY_LABEL, key="merge_busy", disabled=True)
        ctrl.merge()
        st.rerun()


def render_result(ctrl: MergeController):
    result = ctrl.result
    if result is None:
        return
    st.success(f"Merged {result.source_count} PDFs ({result.page_count} pages).")
    st.download_button(
        "⬇️ Download merged PDF",
        data=result.data,
        file_name=result.file_name,
        mime=result.mime_type,
        key="download",
    )


def render(settings=None):
    ctrl = get_controller(settings)
    st.title("📎 Merge PDF")
    render_uploader(ctrl)
    render_notice()
    render_file_list(ctrl)
    render_merge(ctrl)
    render_result(ctrl)
