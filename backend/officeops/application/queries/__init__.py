"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read and returns a Result

Subfolders:
- todos/ → get_todo_by_id, list_todos (all, completed, pending, paged), get_todo_stats
"""
