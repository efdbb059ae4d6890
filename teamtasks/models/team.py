"""
Team Model
"""
import uuid

from sqlalchemy import Column, DateTime, String, Text, Uuid
from sqlalchemy.orm import relationship

from teamtasks.database import Base, utcnow


class Team(Base):
    __tablename__ = "teams"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    members = relationship("TeamMember", back_populates="team", cascade="all, delete-orphan")
    # Never cascaded: a team that still has tasks cannot be deleted.
    tasks = relationship("Task", back_populates="team", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Team {self.name}>"
