"""Animal API - CRUD service over a MongoDB collection of animal records."""

__version__ = "1.0.0"
