FETCH_ERROR = "Failed to fetch users. Make sure backend is running."
SAVE_ERROR = "Failed to save user"
DELETE_ERROR = "Failed to delete user"


class UserApiError(Exception):
    """
    Raised by the users API client for any failed call.

    The message is already fit for the error banner: either the server's
    ``error`` field or the operation's generic fallback.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
