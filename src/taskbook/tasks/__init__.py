"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskStatus, SortKey, TaskStats)
- task_errors.py: TaskError and the recoverable error kinds
- task_store.py: in-memory ordered store + query/sort/statistics
- task_file.py: versioned JSON persistence of the whole store
"""
