"""Errors raised by the task and reminder services"""


class TaskNotFoundError(ValueError):
    """The requested task does not exist"""

    def __init__(self, task_id: str, message: str = "Task not found"):
        super().__init__(message)
        self.task_id = task_id


class StepNotFoundError(TaskNotFoundError):
    """The task or the step at the given index does not exist"""

    def __init__(self, task_id: str, step_index: int):
        super().__init__(task_id, "Step not found")
        self.step_index = step_index


class InvalidStatusError(ValueError):
    """Unknown status filter"""

    def __init__(self, status: str):
        super().__init__("Invalid status")
        self.status = status
