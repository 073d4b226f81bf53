from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from sqlalchemy.ext.orderinglist import ordering_list
from datetime import datetime

from pghub.database import Base
from pghub.utils.uuid_helper import generate_uuid


class Post(Base):
    """
    A post and the attachments it owns.

    Attachments have no lifecycle of their own: removing one from
    ``attachments`` deletes its row, and deleting the post deletes them all.
    """
    __tablename__ = 'posts'

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    attachments = relationship(
        "Attachment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Attachment.position",
        collection_class=ordering_list("position"),
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("title != ''"),
        Index('idx_posts_created_at', 'created_at'),
    )


class Attachment(Base):
    __tablename__ = 'attachments'

    id = Column(String, primary_key=True, default=generate_uuid)
    post_id = Column(String, ForeignKey('posts.id', ondelete='CASCADE'), nullable=False)
    file_name = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)  # index within the owning post's list

    post = relationship("Post", back_populates="attachments")

    __table_args__ = (
        Index('idx_attachments_post_id', 'post_id'),
    )


class User(Base):
    __tablename__ = 'users'

    id = Column(String, primary_key=True, default=generate_uuid)
    email = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint('email', name='uq_users_email'),
    )
