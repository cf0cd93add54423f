"""Helper utilities for todo-txt."""
