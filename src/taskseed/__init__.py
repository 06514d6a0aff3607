"""TaskSeed - synthetic and stored task records for seeding applications."""

__version__ = "0.1.0"
