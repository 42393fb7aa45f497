import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "5"))
MINOR_LATE_MAX_MINUTES = int(os.getenv("MINOR_LATE_MAX_MINUTES", "15"))
WEEKEND_OFF = bool(int(os.getenv("WEEKEND_OFF", "0")))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))
