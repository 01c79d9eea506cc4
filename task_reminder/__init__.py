"""Task Reminder API - task management backend with email reminders."""

__version__ = "1.0.0"
