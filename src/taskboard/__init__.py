"""Single-user task board: workflow state machine, views and ordering."""

__version__ = "0.3.0"
