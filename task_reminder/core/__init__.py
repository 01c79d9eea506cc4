"""Core modules for the Task Reminder API."""
