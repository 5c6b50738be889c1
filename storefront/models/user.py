from typing import List, Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from pydantic import BaseModel

class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Basic Info
    name: str
    email: str = Field(unique=True, index=True)
    password_hash: str

    # Cart stored as JSON list of {"item": <item id>, "quantity": <int>}
    cart: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    # Bumped on every cart write; cart updates are conditional on it
    cart_version: int = Field(default=0)

class UserPublic(BaseModel):
    id: int
    name: str
    email: str
