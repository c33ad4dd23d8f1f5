# models/user.py
from pydantic import BaseModel, ConfigDict
from typing import Optional, Union

class User(BaseModel):
    """A user record as returned by the API. Extra server fields are kept."""
    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    id: Union[int, str]
    name: str
    email: str
    phone: Optional[str] = None

class FormData(BaseModel):
    """Create/edit draft. Never carries an id; identity lives on ViewState.editing_user."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""

    @classmethod
    def from_user(cls, user: User) -> "FormData":
        return cls(name=user.name, email=user.email, phone=user.phone or "")
