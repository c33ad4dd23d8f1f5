"""
Streamlit-free pieces of the user directory page: which screen and list
body to show, and how a user becomes a table row.
"""
import re
from typing import Dict, List, Optional

from models.user import User
from models.view_state import ViewState

COLUMNS = ["ID", "Name", "Email", "Phone", "Actions"]
PHONE_PLACEHOLDER = "-"
LOADING_TEXT = "Loading users..."
EMPTY_TEXT = "No users found. Add one to get started!"
DELETE_PROMPT = "Are you sure you want to delete this user?"
REQUIRED_TEXT = "Name and email are required."
EMAIL_TEXT = "Enter a valid email address."

# same rule browsers apply to <input type="email">
EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def active_screen(state: ViewState) -> str:
    """'form' or 'list'; never both."""
    return "form" if state.show_form else "list"


def list_body(state: ViewState) -> str:
    """'loading', 'empty' or 'table'."""
    if state.loading:
        return "loading"
    if not state.users:
        return "empty"
    return "table"


def user_row(user: User) -> Dict[str, str]:
    return {
        "ID": str(user.id),
        "Name": user.name,
        "Email": user.email,
        "Phone": user.phone or PHONE_PLACEHOLDER,
    }


def user_rows(users: List[User]) -> List[Dict[str, str]]:
    return [user_row(u) for u in users]


def form_labels(state: ViewState) -> Dict[str, str]:
    if state.editing_user is not None:
        return {"heading": "✏️ Edit User", "submit": "Update User"}
    return {"heading": "➕ Add New User", "submit": "Add User"}


def form_problem(name: str, email: str) -> Optional[str]:
    """Why the form can't be sent yet, or None. Values are checked, not changed."""
    if not name.strip() or not email.strip():
        return REQUIRED_TEXT
    if not EMAIL_RE.match(email.strip()):
        return EMAIL_TEXT
    return None
