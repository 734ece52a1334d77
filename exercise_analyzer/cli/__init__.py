"""Exercise analyzer CLI — Typer-based command-line interface.

Provides the ``exercise-analyzer`` command with subcommands for grading a
submission and inspecting the exercise configuration and analyzer
registry. All output uses Rich for formatted terminal display.
"""
