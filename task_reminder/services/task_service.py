"""
Task Service

Handles business logic for tasks including:
- CRUD operations
- Listing tasks by status
- Completing a task (with all of its steps) or a single step
"""

import logging
from datetime import datetime
from typing import List, Optional

from task_reminder.infra.supabase.repositories.tasks import TaskRepository
from task_reminder.models.task import Task, TaskCreate, TaskStatusFilter, TaskUpdate
from task_reminder.services.exceptions import (
    InvalidStatusError,
    StepNotFoundError,
    TaskNotFoundError,
)
from task_reminder.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)


class TaskService:
    """Service for managing tasks"""

    def __init__(self, task_repo: TaskRepository):
        self.task_repo = task_repo

    async def create_task(self, data: TaskCreate) -> Task:
        task = await self.task_repo.create(data)
        logger.info(f"Created task {task.id}")
        return task

    async def list_tasks(self) -> List[Task]:
        return await self.task_repo.find_all()

    async def get_task(self, task_id: str) -> Task:
        task = await self.task_repo.find_by_id(task_id)
        if not task:
            raise TaskNotFoundError(task_id)
        return task

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        """
        Apply a partial update.

        Only fields present in the request are written.

        Raises:
            TaskNotFoundError: No task with this ID
        """
        task = await self.task_repo.update(task_id, data)
        if not task:
            raise TaskNotFoundError(task_id)
        return task

    async def delete_task(self, task_id: str) -> bool:
        deleted = await self.task_repo.delete(task_id)
        if deleted:
            logger.info(f"Deleted task {task_id}")
        return deleted

    async def list_by_status(self, status: str, now: Optional[datetime] = None) -> List[Task]:
        """
        List tasks by status.

        Args:
            status: "pending", "overdue" or "completed"
            now: Reference time for pending/overdue (defaults to current UTC time)

        Raises:
            InvalidStatusError: Unknown status; raised before any query runs
        """
        try:
            status_filter = TaskStatusFilter(status)
        except ValueError:
            raise InvalidStatusError(status)

        now = now or utc_now()
        if status_filter == TaskStatusFilter.PENDING:
            return await self.task_repo.find_pending(now)
        if status_filter == TaskStatusFilter.OVERDUE:
            return await self.task_repo.find_overdue(now)
        return await self.task_repo.find_completed()

    async def complete_task(self, task_id: str) -> Task:
        """
        Mark a task completed and every one of its steps completed.

        Raises:
            TaskNotFoundError: No task with this ID
        """
        task = await self.get_task(task_id)
        steps = [step.model_copy(update={"completed": True}) for step in task.steps]

        updated = await self.task_repo.mark_completed(task_id, steps)
        if not updated:
            raise TaskNotFoundError(task_id)

        logger.info(f"Completed task {task_id} with {len(steps)} steps")
        return updated

    async def complete_step(self, task_id: str, step_index: int) -> Task:
        """
        Mark the step at step_index completed. The task's own completed flag
        is left as is.

        Raises:
            StepNotFoundError: No task with this ID, or index out of range
        """
        task = await self.task_repo.find_by_id(task_id)
        if not task or not 0 <= step_index < len(task.steps):
            raise StepNotFoundError(task_id, step_index)

        steps = list(task.steps)
        steps[step_index] = steps[step_index].model_copy(update={"completed": True})

        updated = await self.task_repo.save_steps(task_id, steps)
        if not updated:
            raise StepNotFoundError(task_id, step_index)
        return updated
