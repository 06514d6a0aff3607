"""User data models."""

from pydantic import BaseModel, ConfigDict, EmailStr


class User(BaseModel):
    """Lightweight user a generated task can be assigned to."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    display_name: str
    email: EmailStr
