"""
COMMANDS - Write operations (CQRS)

Each command has:
- Command class: frozen dataclass holding input data
- Handler class: loads the aggregate, calls business methods, saves through
  the unit of work and returns a Result

Subfolders:
- todos/ → create, update, complete, reopen, delete
"""
