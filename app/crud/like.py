import logging
from typing import List
from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import StoreError, store_error
from app.db.models.like import Like
from app.db.models.user import User

# dialects that support INSERT ... ON CONFLICT DO UPDATE ... RETURNING
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

_STORE_ERROR_DETAIL = "An error occurred, please try again."


def like_post(db: Session, user_id: int, post_id: int) -> Like:
    """Mark ``post_id`` as liked by ``user_id``.

    A single upsert keyed on the (user_id, post_id) pair:

    * no row yet: a new active row is inserted
    * inactive row: that same row is switched back on
    * active row: left active, no duplicate is created
    """
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        logging.error(f"Upsert is not supported on the {dialect} dialect")
        raise StoreError(_STORE_ERROR_DETAIL)

    stmt = (
        insert(Like)
        .values(user_id=user_id, post_id=post_id, active=True)
        .on_conflict_do_update(
            index_elements=[Like.user_id, Like.post_id],
            set_={"active": True},
        )
        .returning(Like)
    )

    try:
        like = db.scalars(stmt, execution_options={"populate_existing": True}).one()
        db.commit()
        db.refresh(like)
        return like
    except SQLAlchemyError as e:
        raise store_error(db, e, _STORE_ERROR_DETAIL)


def unlike_post(db: Session, user_id: int, post_id: int) -> int:
    """Deactivate the pair's active like. Returns how many rows changed (0 or 1)."""
    try:
        updated = db.query(Like).filter(
            Like.user_id == user_id,
            Like.post_id == post_id,
            Like.active == True,
        ).update({Like.active: False}, synchronize_session=False)
        db.commit()
        return updated
    except SQLAlchemyError as e:
        raise store_error(db, e, _STORE_ERROR_DETAIL)


def delete_like(db: Session, like_id: int) -> int:
    # ignores the active flag entirely
    try:
        deleted = db.query(Like).filter(Like.id == like_id).delete(synchronize_session=False)
        db.commit()
        return deleted
    except SQLAlchemyError as e:
        raise store_error(db, e, _STORE_ERROR_DETAIL)


def get_active_likers(db: Session, post_id: int) -> List[dict]:
    try:
        likers = db.query(User.username, Like.user_id, Like.id.label("likes_id"))\
            .join(User, Like.user_id == User.id)\
            .filter(Like.post_id == post_id, Like.active == True)\
            .all()
    except SQLAlchemyError as e:
        raise store_error(db, e, _STORE_ERROR_DETAIL)

    return [
        {
            "username": liker.username,
            "user_id": liker.user_id,
            "likes_id": liker.likes_id,
        }
        for liker in likers
    ]


def count_active_likes(db: Session, post_id: int) -> int:
    try:
        return db.query(func.count(Like.id))\
            .filter(Like.post_id == post_id, Like.active == True)\
            .scalar()
    except SQLAlchemyError as e:
        raise store_error(db, e, _STORE_ERROR_DETAIL)
