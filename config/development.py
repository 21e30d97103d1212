import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON file holding the key-value blobs; the document lives under STORAGE_KEY
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/stafftrack.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "stafftrack_data_v5")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
