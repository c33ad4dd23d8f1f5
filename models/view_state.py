# models/view_state.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from models.user import FormData, User

class ViewState(BaseModel):
    """
    Everything the user directory screen renders from.

    Instances are immutable; core.transitions returns a new one per action.
    """
    model_config = ConfigDict(frozen=True)

    users: List[User] = Field(default_factory=list)
    loading: bool = True  # mount fetch pending
    show_form: bool = False
    editing_user: Optional[User] = None
    form_data: FormData = FormData()
    error: str = ""
    mounted: bool = False
