"""Root conftest - shared test configuration."""

import os

# Importing animal_api.main reads settings; never point tests at a real cluster
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/animal_api_test")
os.environ.setdefault("LOG_FORMAT", "text")
