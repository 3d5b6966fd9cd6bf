"""Root conftest: shared test configuration."""

import os

# Settings are read at import time by usersvc.main; never point tests at a real cluster
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DATABASE", "usersvc_test")
