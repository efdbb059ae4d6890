"""
Task Model
"""
import enum
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship

from teamtasks.database import Base, utcnow


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        SQLEnum(TaskStatus, name="task_status", values_callable=enum_values),
        default=TaskStatus.PENDING,
        nullable=False,
    )
    priority = Column(
        SQLEnum(TaskPriority, name="task_priority", values_callable=enum_values),
        default=TaskPriority.LOW,
        nullable=False,
    )
    assigned_to = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    team_id = Column(Uuid, ForeignKey("teams.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    assignee = relationship("User", back_populates="tasks")
    team = relationship("Team", back_populates="tasks")
    task_history = relationship(
        "TaskHistory",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="TaskHistory.changed_at",
    )

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
