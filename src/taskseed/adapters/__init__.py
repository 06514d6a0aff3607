"""Storage adapters for TaskSeed."""
