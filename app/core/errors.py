import logging
from fastapi import HTTPException, status
from sqlalchemy.orm import Session


class ValidationError(HTTPException):
    """A referenced entity does not exist."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    """A list lookup came back empty."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StoreError(HTTPException):
    # the driver error is logged, never returned to the caller
    def __init__(self, detail: str = "Something went wrong, please try again later!"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def store_error(db: Session, e: Exception, *args) -> StoreError:
    """Roll back ``db``, log ``e`` and build the StoreError to raise."""
    db.rollback()
    logging.error(f"Database error: {str(e)}")
    return StoreError(*args)
