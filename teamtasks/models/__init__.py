"""TeamTasks Database Models"""
from teamtasks.models.user import User, UserRole
from teamtasks.models.team import Team
from teamtasks.models.team_member import TeamMember
from teamtasks.models.task import Task, TaskPriority, TaskStatus
from teamtasks.models.task_history import TaskHistory

__all__ = [
    "User",
    "UserRole",
    "Team",
    "TeamMember",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TaskHistory",
]
