from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.schemas.post import PostCreate, PostOut
from app.crud import post as crud

router = APIRouter()

@router.post("", response_model=PostOut)
def create_post(post_in: PostCreate, db: Session = Depends(get_db)):
    return crud.create_post(db, post_in)


#get all posts of a user
@router.get("/user/{user_id}", response_model=List[PostOut])
def get_user_posts(user_id: int, db: Session = Depends(get_db)):
    return crud.get_posts_by_user(db, user_id)
