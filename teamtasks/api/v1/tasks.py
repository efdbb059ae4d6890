"""Task endpoints"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from teamtasks.database import get_db
from teamtasks.dependencies import require
from teamtasks.errors import DomainConflictError, ForbiddenError, NotFoundError
from teamtasks.models import Task, TaskHistory, TaskStatus, Team, User
from teamtasks.permissions import Action, Principal
from teamtasks.schemas import (
    TaskCreate,
    TaskDetailResponse,
    TaskPriorityUpdate,
    TaskResponse,
    TaskStatusUpdate,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TASK_NOT_FOUND_MESSAGE = "Task not found"
TASK_COMPLETED_MESSAGE = "Task is already completed"
NOT_TASK_OWNER_MESSAGE = "You can only modify your own task"


def _task_query(db: Session):
    return db.query(Task).options(
        selectinload(Task.task_history),
        selectinload(Task.team),
    )


def _load_task(db: Session, task_id: UUID) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
    return task


def _ensure_task_references(db: Session, assigned_to: UUID, team_id: UUID) -> None:
    if db.get(User, assigned_to) is None:
        raise NotFoundError("User not found")
    if db.get(Team, team_id) is None:
        raise NotFoundError("Team not found")


def _reject_if_completed(task: Task, new_status: TaskStatus) -> None:
    # completed is terminal
    if task.is_completed and new_status != TaskStatus.COMPLETED:
        raise DomainConflictError(TASK_COMPLETED_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


@router.get("", response_model=List[TaskDetailResponse])
def list_tasks(db: Session = Depends(get_db)):
    """List every task with its status history and team."""
    return _task_query(db).order_by(Task.created_at.asc()).all()


@router.get("/{task_id}", response_model=TaskDetailResponse)
def get_task(task_id: UUID, db: Session = Depends(get_db)):
    task = _task_query(db).filter(Task.id == task_id).first()
    if not task:
        raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
    return task


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_in: TaskCreate, db: Session = Depends(get_db)):
    """Create a task for an existing user in an existing team."""
    _ensure_task_references(db, task_in.assigned_to, task_in.team_id)

    task = Task(
        title=task_in.title,
        description=task_in.description,
        priority=task_in.priority,
        assigned_to=task_in.assigned_to,
        team_id=task_in.team_id,
    )
    db.add(task)
    try:
        db.commit()
    except IntegrityError:
        # A referenced row disappeared between the check and the insert
        db.rollback()
        _ensure_task_references(db, task_in.assigned_to, task_in.team_id)
        raise
    db.refresh(task)

    logger.info("Created task %s in team %s", task.id, task.team_id)
    return task


@router.patch("/{task_id}/status", response_model=TaskResponse)
def update_task_status(
    task_id: UUID,
    status_in: TaskStatusUpdate,
    principal: Principal = Depends(require(Action.TASK_UPDATE_STATUS)),
    db: Session = Depends(get_db),
):
    """Move a task to a new status and record the transition."""
    task = _load_task(db, task_id)
    if task.is_completed:
        raise DomainConflictError(TASK_COMPLETED_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    if db.get(User, principal.id) is None:
        raise NotFoundError("User not found")

    old_status = task.status
    # History row goes in first; both land in the same commit.
    db.add(
        TaskHistory(
            task_id=task.id,
            old_status=old_status,
            new_status=status_in.status,
            changed_by=principal.id,
        )
    )
    db.flush()

    task.status = status_in.status
    db.commit()
    db.refresh(task)

    logger.info(
        "Task %s status %s -> %s by %s",
        task.id,
        old_status.value,
        task.status.value,
        principal.id,
    )
    return task


@router.patch("/{task_id}/priority", response_model=TaskResponse)
def update_task_priority(
    task_id: UUID,
    priority_in: TaskPriorityUpdate,
    principal: Principal = Depends(require(Action.TASK_UPDATE_PRIORITY)),
    db: Session = Depends(get_db),
):
    task = _load_task(db, task_id)
    task.priority = priority_in.priority
    db.commit()
    db.refresh(task)
    return task


@router.patch("/{task_id}/updateByUser", response_model=TaskResponse)
def update_task_by_assignee(
    task_id: UUID,
    task_in: TaskUpdate,
    principal: Principal = Depends(require(Action.TASK_UPDATE_OWN)),
    db: Session = Depends(get_db),
):
    """Let the assignee edit their own task. No history is recorded here."""
    task = _load_task(db, task_id)
    if task.assigned_to != principal.id:
        raise ForbiddenError(NOT_TASK_OWNER_MESSAGE)
    _reject_if_completed(task, task_in.status)

    for field, value in task_in.model_dump().items():
        setattr(task, field, value)

    db.commit()
    db.refresh(task)
    return task


@router.delete("/{task_id}")
def delete_task(task_id: UUID, db: Session = Depends(get_db)):
    task = _load_task(db, task_id)
    db.delete(task)
    db.commit()

    logger.info("Deleted task %s", task_id)
    return Response(status_code=status.HTTP_200_OK)
