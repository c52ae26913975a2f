"""
Storage subsystem.

- blob_store.py: key -> text blob stores (SQLite, in-memory)
- repository.py: JSON encoding of the task list and theme preference
"""
