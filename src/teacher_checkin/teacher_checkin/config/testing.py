import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "5"))
MINOR_LATE_MAX_MINUTES = int(os.getenv("MINOR_LATE_MAX_MINUTES", "15"))
WEEKEND_OFF = bool(int(os.getenv("WEEKEND_OFF", "0")))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_JSON = False
