"""User model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, SoftDeleteMixin, TimestampMixin


class User(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)  # NULL for OAuth-only users
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # OAuth identity
    is_oauth: Mapped[bool] = mapped_column(Boolean, default=False)
    oauth_uid: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    oauth_provider: Mapped[str | None] = mapped_column(String(50), nullable=True)
    oauth_picture: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    categories = relationship("Category", back_populates="user", lazy="select")
    transactions = relationship("Transaction", back_populates="user", lazy="select")
