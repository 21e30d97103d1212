import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_PATH = os.getenv("STORAGE_PATH", "/var/lib/stafftrack/stafftrack.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "stafftrack_data_v5")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
