"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskEvent)
- task_store.py: in-memory ordered store + change notifications
- task_api.py: form drafts and task reference helpers used by the view layer
"""
