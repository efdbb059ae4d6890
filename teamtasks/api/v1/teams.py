"""Team and team membership endpoints"""
import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from teamtasks.database import get_db
from teamtasks.dependencies import require
from teamtasks.errors import DomainConflictError, NotFoundError
from teamtasks.models import Task, Team, TeamMember, User
from teamtasks.permissions import Action, Principal
from teamtasks.schemas import TeamCreate, TeamMemberCreate, TeamMemberResponse, TeamResponse

logger = logging.getLogger(__name__)

router = APIRouter()

TEAM_NOT_FOUND_MESSAGE = "Team not found"
OPEN_TASKS_MESSAGE = "You have open tasks for this team. Complete the tasks before deleting the team."
ALREADY_MEMBER_MESSAGE = "User is already a member of this team"


def _load_team(db: Session, team_id: UUID) -> Team:
    team = db.get(Team, team_id)
    if not team:
        raise NotFoundError(TEAM_NOT_FOUND_MESSAGE)
    return team


def _member_query(db: Session):
    return db.query(TeamMember).options(selectinload(TeamMember.user))


def _find_member(db: Session, team_id: UUID, user_id: UUID) -> Optional[TeamMember]:
    return (
        db.query(TeamMember)
        .filter(TeamMember.team_id == team_id, TeamMember.user_id == user_id)
        .first()
    )


def _team_has_tasks(db: Session, team_id: UUID) -> bool:
    return db.query(Task.id).filter(Task.team_id == team_id).first() is not None


@router.get("", response_model=List[TeamResponse])
def list_teams(
    principal: Principal = Depends(require(Action.TEAM_LIST)),
    db: Session = Depends(get_db),
):
    return db.query(Team).order_by(Team.created_at.asc()).all()


@router.post("", response_model=TeamResponse)
def create_team(
    team_in: TeamCreate,
    principal: Principal = Depends(require(Action.TEAM_CREATE)),
    db: Session = Depends(get_db),
):
    team = Team(name=team_in.name, description=team_in.description)
    db.add(team)
    db.commit()
    db.refresh(team)

    logger.info("Team %s created by %s", team.id, principal.id)
    return team


@router.delete("/{team_id}")
def delete_team(
    team_id: UUID,
    principal: Principal = Depends(require(Action.TEAM_DELETE)),
    db: Session = Depends(get_db),
):
    """Delete a team that no task references. Memberships go with it."""
    team = _load_team(db, team_id)

    if _team_has_tasks(db, team.id):
        raise DomainConflictError(OPEN_TASKS_MESSAGE)

    db.delete(team)
    try:
        db.commit()
    except IntegrityError:
        # A task was created for this team after the check
        db.rollback()
        raise DomainConflictError(OPEN_TASKS_MESSAGE)

    logger.info("Team %s deleted by %s", team_id, principal.id)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{team_id}/members", response_model=List[TeamMemberResponse])
def list_members(
    team_id: UUID,
    principal: Principal = Depends(require(Action.TEAM_MEMBERS_LIST)),
    db: Session = Depends(get_db),
):
    team = _load_team(db, team_id)
    return (
        _member_query(db)
        .filter(TeamMember.team_id == team.id)
        .order_by(TeamMember.created_at.asc())
        .all()
    )


@router.post("/{team_id}/members", response_model=TeamMemberResponse)
def add_member(
    team_id: UUID,
    member_in: TeamMemberCreate,
    principal: Principal = Depends(require(Action.TEAM_MEMBERS_MANAGE)),
    db: Session = Depends(get_db),
):
    team = _load_team(db, team_id)
    user = db.get(User, member_in.user_id)
    if not user:
        raise NotFoundError("User not found")

    if _find_member(db, team.id, user.id):
        raise DomainConflictError(ALREADY_MEMBER_MESSAGE)

    member = TeamMember(team_id=team.id, user_id=user.id)
    db.add(member)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DomainConflictError(ALREADY_MEMBER_MESSAGE)

    logger.info("User %s added to team %s", user.id, team.id)
    return _member_query(db).filter(TeamMember.id == member.id).first()


@router.delete("/{team_id}/members/{user_id}")
def remove_member(
    team_id: UUID,
    user_id: UUID,
    principal: Principal = Depends(require(Action.TEAM_MEMBERS_MANAGE)),
    db: Session = Depends(get_db),
):
    team = _load_team(db, team_id)
    member = _find_member(db, team.id, user_id)
    if not member:
        raise NotFoundError("Member not found")

    db.delete(member)
    db.commit()

    logger.info("User %s removed from team %s", user_id, team_id)
    return Response(status_code=status.HTTP_200_OK)
