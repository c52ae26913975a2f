"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, Priority, TaskGroup, ViewFilter, Theme)
- workflow.py: status transition graph and review gating
- task_store.py: in-memory ordered store with title/id invariants
- query.py: grouping, view filters and board columns
- sorting.py: display ordering (completion, group, priority)
"""
