"""
Core orchestration.

- ports.py: Protocols the core depends on (blob store, repository, change listener)
- board.py: command interface used by front-ends
- state.py: per-session application state
"""
