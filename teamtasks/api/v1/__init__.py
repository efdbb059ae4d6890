from fastapi import APIRouter

from teamtasks.api.v1 import sessions, tasks, teams, users

api_router = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(tasks.router, prefix="/task", tags=["tasks"])
api_router.include_router(teams.router, prefix="/team", tags=["teams"])
