"""
Pure view-state transitions for the user directory screen.

Each function takes the current ViewState and returns a new one; nothing
here touches the network. services.user_directory pairs them with API calls.
"""
from typing import Iterable

from core.exceptions import FETCH_ERROR
from models.user import FormData, User
from models.view_state import ViewState


def mounted(state: ViewState) -> ViewState:
    return state.model_copy(update={"mounted": True})


def fetch_started(state: ViewState) -> ViewState:
    return state.model_copy(update={"loading": True})


def fetch_succeeded(state: ViewState, users: Iterable[User]) -> ViewState:
    # wholesale replace, no merge
    return state.model_copy(update={"users": list(users), "error": "", "loading": False})


def fetch_failed(state: ViewState, message: str = FETCH_ERROR) -> ViewState:
    return state.model_copy(update={"error": message, "loading": False})


def show_create_form(state: ViewState) -> ViewState:
    return state.model_copy(update={"show_form": True, "editing_user": None, "form_data": FormData()})


def show_edit_form(state: ViewState, user: User) -> ViewState:
    return state.model_copy(
        update={"show_form": True, "editing_user": user, "form_data": FormData.from_user(user)}
    )


def update_draft(state: ViewState, **fields) -> ViewState:
    return state.model_copy(update={"form_data": state.form_data.model_copy(update=fields)})


def submit_succeeded(state: ViewState) -> ViewState:
    return state.model_copy(update={"form_data": FormData(), "show_form": False, "editing_user": None})


def action_failed(state: ViewState, message: str) -> ViewState:
    """Surface an error from submit/delete; form and draft are left as they are."""
    return state.model_copy(update={"error": message})


def cancel(state: ViewState) -> ViewState:
    return state.model_copy(
        update={"show_form": False, "editing_user": None, "form_data": FormData(), "error": ""}
    )


def dismiss_error(state: ViewState) -> ViewState:
    return state.model_copy(update={"error": ""})
