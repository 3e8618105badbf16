from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.schemas.like import LikeCreate, LikeOut, LikerOut, LikeCount
from app.schemas.message import MessageOut
from app.crud import like as crud

router = APIRouter()

@router.post("", response_model=LikeOut)
def like_post(like_in: LikeCreate, db: Session = Depends(get_db)):
    return crud.like_post(db, like_in.user_id, like_in.post_id)


#soft unlike, keeps the row for a later like
@router.put("/{user_id}/{post_id}", response_model=MessageOut)
def unlike_post(user_id: int, post_id: int, db: Session = Depends(get_db)):
    crud.unlike_post(db, user_id, post_id)
    return {"message": "Like removed successfully"}


@router.delete("/{like_id}", response_model=MessageOut)
def delete_like(like_id: int, db: Session = Depends(get_db)):
    crud.delete_like(db, like_id)
    return {"message": "Like Deleted Successfully"}


#users currently liking a post
@router.get("/post/{post_id}", response_model=List[LikerOut])
def get_post_likers(post_id: int, db: Session = Depends(get_db)):
    return crud.get_active_likers(db, post_id)


@router.get("/post/{post_id}/count", response_model=LikeCount)
def get_post_like_count(post_id: int, db: Session = Depends(get_db)):
    return {"post_id": post_id, "likes": crud.count_active_likes(db, post_id)}
