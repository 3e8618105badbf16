from sqlalchemy import Column, Integer, Boolean, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.db.base import Base

class Like(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # soft toggle: unlike flips this off, the row is kept
    active = Column(Boolean, nullable=False, default=True)

    user = relationship("User", back_populates="likes")
    post = relationship("Post", back_populates="likes")

    # one row per user/post pair, so at most one active like
    __table_args__ = (UniqueConstraint("user_id", "post_id", name="uq_likes_user_post"),)
