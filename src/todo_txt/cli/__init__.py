"""Command-line interface package for todo-txt."""

__all__ = ["main"]


def main(*args, **kwargs):
    """Entry point that defers click and rich imports until needed."""
    from .tasks import main as tasks_main

    return tasks_main(*args, **kwargs)
