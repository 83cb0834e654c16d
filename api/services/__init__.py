"""
High-level use cases for the records API.

Each service module orchestrates repositories to implement the lookup rules.
Routers (FastAPI endpoints) call these services instead of reading the JSON
file directly.
"""
