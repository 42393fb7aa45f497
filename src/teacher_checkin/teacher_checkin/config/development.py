import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Punctuality policy
GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "5"))
MINOR_LATE_MAX_MINUTES = int(os.getenv("MINOR_LATE_MAX_MINUTES", "15"))

# 1 = no periods on Saturday/Sunday
WEEKEND_OFF = bool(int(os.getenv("WEEKEND_OFF", "0")))

# Load demo teachers/classrooms on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))
