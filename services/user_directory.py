import logging

from core import transitions
from core.exceptions import UserApiError
from models.user import FormData, User
from models.view_state import ViewState
from services.user_api import UserApiClient, UserId

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Controller behind the user directory screen.

    One method per user action. Each method replaces ``self.state`` with
    the result of a pure transition, calling the API where the action
    needs it. API failures end up in ``state.error``; nothing is raised to
    the caller.
    """

    def __init__(self, client: UserApiClient | None = None, state: ViewState | None = None):
        self.client = client or UserApiClient()
        self.state = state or ViewState()

    def mount(self):
        """Fetch the list once per session."""
        if self.state.mounted:
            return
        self.state = transitions.mounted(self.state)
        self.refresh()

    def refresh(self):
        self.state = transitions.fetch_started(self.state)
        try:
            users = self.client.list_users()
        except UserApiError as e:
            self.state = transitions.fetch_failed(self.state, e.message)
            return
        logger.info("Fetched %d users", len(users))
        self.state = transitions.fetch_succeeded(self.state, users)

    def show_create_form(self):
        self.state = transitions.show_create_form(self.state)

    def show_edit_form(self, user: User):
        self.state = transitions.show_edit_form(self.state, user)

    def update_draft(self, **fields):
        self.state = transitions.update_draft(self.state, **fields)

    def submit(self, form: FormData | None = None):
        """
        Create or update depending on whether a user is being edited.

        ``form`` replaces the draft before sending; on failure the draft
        stays so the form can be re-rendered as the user left it.
        """
        if form is not None:
            self.state = transitions.update_draft(self.state, **form.model_dump())
        draft = self.state.form_data
        editing = self.state.editing_user
        try:
            if editing is None:
                self.client.create_user(draft)
            else:
                self.client.update_user(editing.id, draft)
        except UserApiError as e:
            self.state = transitions.action_failed(self.state, e.message)
            return
        logger.info("Saved user %s", editing.id if editing else "(new)")
        self.state = transitions.submit_succeeded(self.state)
        self.refresh()

    def delete(self, user_id: UserId, confirmed: bool = False):
        if not confirmed:
            return
        try:
            self.client.delete_user(user_id)
        except UserApiError as e:
            self.state = transitions.action_failed(self.state, e.message)
            return
        logger.info("Deleted user %s", user_id)
        self.refresh()

    def cancel(self):
        self.state = transitions.cancel(self.state)

    def dismiss_error(self):
        self.state = transitions.dismiss_error(self.state)
