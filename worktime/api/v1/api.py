"""API v1 router composition."""

from fastapi import APIRouter

from worktime.api.v1.endpoints import schedule, timezones, work_time

api_router: APIRouter = APIRouter()
api_router.include_router(work_time.router, prefix="/worktime", tags=["worktime"])
api_router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
api_router.include_router(timezones.router, prefix="/timezones", tags=["timezones"])
