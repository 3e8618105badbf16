from pydantic import BaseModel
from datetime import datetime

class LikeCreate(BaseModel):
    user_id: int
    post_id: int

class LikeOut(LikeCreate):
    id: int
    created_at: datetime
    active: bool

    class Config:
        from_attributes = True

class LikerOut(BaseModel):
    username: str
    user_id: int
    likes_id: int

    class Config:
        from_attributes = True

class LikeCount(BaseModel):
    post_id: int
    likes: int
