"""
Streamlit UI for the user directory.

Lists users from the users API (settings.API_URL) and lets you add, edit
and delete them. All view-state lives on a UserDirectory kept in
st.session_state; this script only renders it and forwards clicks.

Run with: streamlit run ui/app_streamlit.py
"""
import sys
from pathlib import Path

import streamlit as st

# Ensure project root is on sys.path when launched from a checkout
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from config.settings import settings
from core.logging import configure_logging
from models.user import FormData
from services.user_directory import UserDirectory
from ui.render import (
    COLUMNS, DELETE_PROMPT, EMPTY_TEXT, LOADING_TEXT,
    active_screen, form_labels, form_problem, list_body, user_row,
)

configure_logging(settings.LOG_LEVEL)

st.set_page_config(page_title=settings.APP_TITLE, layout="wide")

# ---------------- Session init ----------------

if "directory" not in st.session_state:
    st.session_state.directory = UserDirectory()

if "pending_delete" not in st.session_state:
    st.session_state.pending_delete = None

directory: UserDirectory = st.session_state.directory

if not directory.state.mounted:
    with st.spinner(LOADING_TEXT):
        directory.mount()


# ---------------- Sections ----------------

def error_banner():
    error = directory.state.error
    if not error:
        return
    col1, col2 = st.columns([12, 1])
    with col1:
        st.error(error)
    with col2:
        if st.button("×", key="dismiss_error"):
            directory.dismiss_error()
            st.rerun()


def delete_confirmation():
    user_id = st.session_state.pending_delete
    if user_id is None:
        return
    st.warning(DELETE_PROMPT)
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Yes, delete", key="confirm_delete"):
            st.session_state.pending_delete = None
            with st.spinner("Deleting..."):
                directory.delete(user_id, confirmed=True)
            st.rerun()
    with col2:
        if st.button("No", key="abort_delete"):
            st.session_state.pending_delete = None
            st.rerun()


def list_view():
    state = directory.state
    col1, col2, _ = st.columns([2, 2, 8])
    with col1:
        if st.button("+ Add New User", type="primary", use_container_width=True):
            st.session_state.pending_delete = None
            directory.show_create_form()
            st.rerun()
    with col2:
        if st.button("↻ Refresh", use_container_width=True):
            with st.spinner(LOADING_TEXT):
                directory.refresh()
            st.rerun()

    delete_confirmation()

    body = list_body(state)
    if body == "loading":
        st.info(LOADING_TEXT)
        return
    if body == "empty":
        st.info(EMPTY_TEXT)
        return

    widths = [1, 3, 4, 3, 3]
    for col, title in zip(st.columns(widths), COLUMNS):
        col.markdown(f"**{title}**")
    for user in state.users:
        row = user_row(user)
        cols = st.columns(widths)
        for col, title in zip(cols, COLUMNS[:-1]):
            col.write(row[title])
        edit_col, delete_col = cols[-1].columns(2)
        if edit_col.button("✏️ Edit", key=f"edit_{user.id}"):
            st.session_state.pending_delete = None
            directory.show_edit_form(user)
            st.rerun()
        if delete_col.button("🗑️ Delete", key=f"delete_{user.id}"):
            st.session_state.pending_delete = user.id
            st.rerun()


def form_view():
    state = directory.state
    labels = form_labels(state)
    draft = state.form_data
    st.subheader(labels["heading"])

    with st.form("user_form", clear_on_submit=False):
        name = st.text_input("Name *", value=draft.name, placeholder="Enter name")
        email = st.text_input("Email *", value=draft.email, placeholder="Enter email")
        phone = st.text_input("Phone", value=draft.phone, placeholder="Enter phone number")
        col1, col2 = st.columns(2)
        with col1:
            submitted = st.form_submit_button(labels["submit"], type="primary")
        with col2:
            cancelled = st.form_submit_button("Cancel")

    if submitted:
        form = FormData(name=name, email=email, phone=phone)
        problem = form_problem(name, email)
        if problem:
            directory.update_draft(**form.model_dump())
            st.warning(problem)
            return
        with st.spinner("Saving..."):
            directory.submit(form)
        st.rerun()

    if cancelled:
        directory.cancel()
        st.rerun()


# ---------------- Page ----------------

st.title(f"📋 {settings.APP_TITLE}")
st.caption(settings.APP_SUBTITLE)

error_banner()

if active_screen(directory.state) == "form":
    form_view()
else:
    list_view()

st.markdown("---")
st.caption("Built with Streamlit + requests")
