# Post model for user content
import uuid
from typing import List

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 10000
CATEGORY_MAX_LENGTH = 50
TAG_MAX_LENGTH = 30
DEFAULT_CATEGORY = "General"


class Post(BaseModel):
    """A personal text post owned by exactly one user."""

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(
        String(CATEGORY_MAX_LENGTH), nullable=False, default=DEFAULT_CATEGORY
    )

    # set once at creation, never reassigned
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    tag_entries: Mapped[List["PostTag"]] = relationship(
        "PostTag",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostTag.position",
        lazy="selectin",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="ck_posts_title_len"),
        CheckConstraint(f"length(content) <= {CONTENT_MAX_LENGTH}", name="ck_posts_content_len"),
        CheckConstraint(f"length(category) <= {CATEGORY_MAX_LENGTH}", name="ck_posts_category_len"),
        # main listing query: owner's posts newest first
        Index("idx_posts_owner_created", "owner_id", "created_at"),
        Index("idx_posts_owner_category", "owner_id", "category"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Post(title='{truncated}', owner_id={self.owner_id})>"

    @property
    def tags(self) -> List[str]:
        """Tag names in their stored order."""
        return [entry.name for entry in self.tag_entries]

    def set_tags(self, names: List[str]) -> None:
        """Replace the tag sequence, keeping the given order."""
        self.tag_entries = [
            PostTag(name=name, position=index) for index, name in enumerate(names)
        ]


class PostTag(BaseModel):
    """One entry of a post's ordered tag sequence."""

    __tablename__ = "post_tags"

    post_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(TAG_MAX_LENGTH), nullable=False)

    post: Mapped["Post"] = relationship("Post", back_populates="tag_entries")

    __table_args__ = (
        CheckConstraint(f"length(name) <= {TAG_MAX_LENGTH}", name="ck_post_tags_name_len"),
        Index("idx_post_tags_post_position", "post_id", "position"),
        Index("idx_post_tags_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<PostTag(name='{self.name}', position={self.position})>"
