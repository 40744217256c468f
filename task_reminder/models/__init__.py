"""Domain models for the application"""
from .task import Task, TaskCreate, TaskUpdate, TaskStep, TaskStatusFilter
from .email import EmailMessage, DeliveryResult, SendRemindersResponse

__all__ = [
    'Task', 'TaskCreate', 'TaskUpdate', 'TaskStep', 'TaskStatusFilter',
    'EmailMessage', 'DeliveryResult', 'SendRemindersResponse',
]
