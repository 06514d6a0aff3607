"""CLI commands for TaskSeed."""
