import os
import tempfile

SECRET_KEY = "test-secret"

STORAGE_PATH = os.getenv("STORAGE_PATH", os.path.join(tempfile.gettempdir(), "stafftrack-test.json"))
STORAGE_KEY = "stafftrack_data_v5"

# Summary calls always take the "no key" path under test
OPENAI_API_KEY = ""
OPENAI_MODEL = "gpt-4o-mini"

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
