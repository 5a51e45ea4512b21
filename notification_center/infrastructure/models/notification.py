"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from notification_center.config import get_settings
from notification_center.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = get_settings().notifications_table

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(255), nullable=False)
    data = Column(Text, nullable=True)
    user_id = Column(Integer, nullable=False, index=True)
    created_at = Column(Integer, nullable=False)
    updated_at = Column(Integer, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    is_deleted = Column(Boolean, nullable=False, default=False)


__all__ = ["NotificationModel"]
