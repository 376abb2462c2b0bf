"""Main API router that includes versioned routers."""

from fastapi import APIRouter

from api.v1 import (
    clients,
    costs,
    database,
    db_check,
    health,
    human_resources,
    milestones,
    project_resources,
    project_roles,
    projects,
    tasks,
)

# Main API router
api_router = APIRouter()

# Include v1 routers
v1_router = APIRouter(prefix="/v1")
v1_router.include_router(health.router, tags=["health"])
v1_router.include_router(db_check.router, tags=["database"])
v1_router.include_router(database.router, tags=["database"])
v1_router.include_router(clients.router, tags=["clients"])
v1_router.include_router(human_resources.router, tags=["human-resources"])
v1_router.include_router(projects.router, tags=["projects"])
v1_router.include_router(project_resources.router, tags=["project-resources"])
v1_router.include_router(project_roles.router, tags=["project-roles"])
v1_router.include_router(milestones.router, tags=["milestones"])
v1_router.include_router(tasks.router, tags=["tasks"])
v1_router.include_router(costs.router, tags=["costs"])

api_router.include_router(v1_router)
