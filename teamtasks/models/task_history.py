"""
Task History Model
"""
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship

from teamtasks.database import Base, utcnow
from teamtasks.models.task import TaskStatus, enum_values


class TaskHistory(Base):
    """One row per accepted status transition. Rows are never updated."""

    __tablename__ = "task_history"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    task_id = Column(Uuid, ForeignKey("tasks.id"), nullable=False, index=True)
    old_status = Column(SQLEnum(TaskStatus, name="task_status", values_callable=enum_values), nullable=False)
    new_status = Column(SQLEnum(TaskStatus, name="task_status", values_callable=enum_values), nullable=False)
    changed_by = Column(Uuid, ForeignKey("users.id"), nullable=False)
    changed_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    task = relationship("Task", back_populates="task_history")
    author = relationship("User")
