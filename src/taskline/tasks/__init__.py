"""
Task subsystem.

Components:
- task_models.py: Task and its variants (Todo, Deadline, Event)
- task_store.py: bounded, append-only in-memory store
"""
