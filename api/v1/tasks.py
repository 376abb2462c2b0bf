"""Task endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.task import (
    TaskCreate,
    TaskListResponse,
    TaskQueryParams,
    TaskResponse,
    TaskUpdate,
)
from services.tasks_service import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)

router = APIRouter()


@router.get("/tasks", response_model=TaskListResponse)
async def list_tasks_endpoint(db: AsyncSession = Depends(get_db)):
    """List tasks with default pagination."""
    try:
        return await list_tasks(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch tasks") from e


@router.post("/tasks/search", response_model=TaskListResponse)
async def search_tasks_endpoint(
    params: TaskQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List tasks matching the filters, sorts and pagination in the request body."""
    try:
        return await list_tasks(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search tasks") from e


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task_endpoint(
    task_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        task = await get_task(db, task_id=task_id)
        return TaskResponse.model_validate(task)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch task") from e


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task_endpoint(
    task_data: TaskCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new task."""
    try:
        task = await create_task(db, payload=task_data)
        return TaskResponse.model_validate(task)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create task") from e


@router.put("/tasks/{task_id}")
async def update_task_endpoint(
    task_id: int,
    task_data: TaskUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing task.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_task(db, task_id=task_id, payload=task_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update task") from e


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task_endpoint(
    task_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_task(db, task_id=task_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete task") from e
