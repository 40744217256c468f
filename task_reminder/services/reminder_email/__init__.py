from .template import build_subject, render_reminder_html, task_url

__all__ = ["build_subject", "render_reminder_html", "task_url"]
