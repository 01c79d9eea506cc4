from typing import Optional
from pydantic import BaseModel


# Fields are optional so that empty and absent values get the same
# "All fields required" answer from the store.
class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class Token(BaseModel):
    token: str
