from pydantic import BaseModel
from typing import Optional


# Schema buat Response (password hash tidak pernah dikirim)
class UserResponse(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    role: str
    is_active: bool

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str
