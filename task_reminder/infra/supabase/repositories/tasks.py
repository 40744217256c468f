"""Task repository"""
from datetime import datetime
from typing import List, Optional

from supabase import Client  # type: ignore

from task_reminder.models.task import Task, TaskCreate, TaskStep, TaskUpdate

from .base import BaseRepository


class TaskRepository(BaseRepository[Task, TaskCreate, TaskUpdate]):
    """Repository for task operations"""

    def __init__(self, client: Client):
        super().__init__(client, "tasks", Task)

    async def find_incomplete(self) -> List[Task]:
        """Find all tasks not yet completed"""
        return await self.find_by_filters({"completed": False})

    async def find_completed(self) -> List[Task]:
        """Find all completed tasks"""
        return await self.find_by_filters({"completed": True})

    async def find_pending(self, now: datetime) -> List[Task]:
        """Incomplete tasks due at or after now"""
        response = (
            self._client.table(self._table_name)
            .select("*")
            .eq("completed", False)
            .gte("due_date", now.isoformat())
            .execute()
        )
        return self._to_models(response.data)

    async def find_overdue(self, now: datetime) -> List[Task]:
        """Incomplete tasks whose due date has passed"""
        response = (
            self._client.table(self._table_name)
            .select("*")
            .eq("completed", False)
            .lt("due_date", now.isoformat())
            .execute()
        )
        return self._to_models(response.data)

    async def find_incomplete_due_between(self, start: datetime, end: datetime) -> List[Task]:
        """Incomplete tasks with start <= due_date <= end

        Args:
            start: Lower bound (inclusive)
            end: Upper bound (inclusive)
        """
        response = (
            self._client.table(self._table_name)
            .select("*")
            .eq("completed", False)
            .gte("due_date", start.isoformat())
            .lte("due_date", end.isoformat())
            .execute()
        )
        return self._to_models(response.data)

    async def save_steps(self, task_id: str, steps: List[TaskStep]) -> Optional[Task]:
        """Overwrite the step list of a task"""
        return await self.update_fields(
            task_id, {"steps": [step.model_dump(mode="json") for step in steps]}
        )

    async def mark_completed(self, task_id: str, steps: List[TaskStep]) -> Optional[Task]:
        """Mark a task and the given steps as completed"""
        return await self.update_fields(
            task_id,
            {
                "completed": True,
                "steps": [step.model_dump(mode="json") for step in steps],
            },
        )
