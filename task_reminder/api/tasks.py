import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import List

from task_reminder.api.deps import get_reminder_service, get_task_service
from task_reminder.models.task import Task, TaskCreate, TaskUpdate
from task_reminder.services.exceptions import InvalidStatusError, StepNotFoundError, TaskNotFoundError
from task_reminder.services.reminder_service import ReminderService
from task_reminder.services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


class DeleteResponse(BaseModel):
    success: bool


@router.post("", response_model=Task)
async def create_task(request: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task"""
    return await service.create_task(request)


@router.get("", response_model=List[Task])
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """List all tasks"""
    return await service.list_tasks()


@router.get("/status/{status}", response_model=List[Task])
async def list_tasks_by_status(status: str, service: TaskService = Depends(get_task_service)):
    """
    List tasks by status.

    - pending: not completed, due now or later
    - overdue: not completed, due date in the past
    - completed: completed tasks
    """
    try:
        return await service.list_by_status(status)
    except InvalidStatusError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/reminders/upcoming", response_model=List[Task])
async def list_upcoming_reminders(service: ReminderService = Depends(get_reminder_service)):
    """List incomplete tasks whose reminder schedule includes today"""
    return await service.get_upcoming()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Get a single task by ID"""
    try:
        return await service.get_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{task_id}/edit", response_model=Task)
async def update_task(
    task_id: str,
    request: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Update the fields present in the request body"""
    try:
        return await service.update_task(task_id, request)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{task_id}", response_model=DeleteResponse)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a task"""
    await service.delete_task(task_id)
    return {"success": True}


@router.put("/{task_id}/complete", response_model=Task)
async def complete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Complete a task and all of its steps"""
    try:
        return await service.complete_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{task_id}/step/{step_index}/complete", response_model=Task)
async def complete_step(
    task_id: str,
    step_index: str,
    service: TaskService = Depends(get_task_service),
):
    """Complete a single step by its position"""
    try:
        try:
            index = int(step_index)
        except ValueError:
            raise StepNotFoundError(task_id, -1)
        return await service.complete_step(task_id, index)
    except StepNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
