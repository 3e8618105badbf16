from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import NotFoundError, ValidationError, store_error
from app.db.models.post import Post
from app.db.models.user import User
from app.schemas.post import PostCreate


def create_post(db: Session, post_in: PostCreate) -> Post:
    try:
        # Check if user exists
        user = db.query(User).filter(User.id == post_in.user_id).first()
        if not user:
            raise ValidationError("User does not exist")

        new_post = Post(
            title=post_in.title,
            content=post_in.content,
            user_id=post_in.user_id,
        )
        db.add(new_post)
        db.commit()
        db.refresh(new_post)
        return new_post
    except SQLAlchemyError as e:
        raise store_error(db, e)


def get_posts_by_user(db: Session, user_id: int) -> List[Post]:
    """Every post written by ``user_id``, in store order.

    An empty result is reported as NotFoundError rather than ``[]`` so
    existing clients that branch on 404 keep working.
    """
    try:
        posts = db.query(Post).filter(Post.user_id == user_id).all()
    except SQLAlchemyError as e:
        raise store_error(db, e)

    if not posts:
        raise NotFoundError("No posts found for this user")
    return posts
