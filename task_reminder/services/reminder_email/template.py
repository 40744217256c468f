from html import escape

from task_reminder.models.task import Task
from task_reminder.utils.datetime_helper import format_due_date


REMINDER_TEMPLATE = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">Task Reminder</h2>
  <p>This is a reminder that the following task is due {due_phrase}:</p>
  <h3 style="margin-bottom: 4px;">{title}</h3>
  <p style="color: #555;">{description}</p>
  <p><strong>Due:</strong> {due_date}</p>
  <p>
    <a href="{task_url}"
       style="display: inline-block; padding: 10px 16px; background: #2563eb; color: #fff; text-decoration: none; border-radius: 4px;">
      View task
    </a>
  </p>
</div>
"""


def due_phrase(days_left: int) -> str:
    if days_left == 0:
        return "today"
    if days_left == 1:
        return "in 1 day"
    return f"in {days_left} days"


def task_url(base_url: str, task_id: str) -> str:
    return f"{base_url.rstrip('/')}/tasks/{task_id}"


def build_subject(task: Task, days_left: int) -> str:
    return f"Reminder: {task.title} is due {due_phrase(days_left)}"


def render_reminder_html(task: Task, days_left: int, base_url: str) -> str:
    """Fill the reminder template with the task's fields"""
    return REMINDER_TEMPLATE.format(
        due_phrase=due_phrase(days_left),
        title=escape(task.title),
        description=escape(task.description),
        due_date=format_due_date(task.due_date) if task.due_date else "No due date",
        task_url=escape(task_url(base_url, task.id), quote=True),
    )
