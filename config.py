import os
from dotenv import load_dotenv
load_dotenv()


def _optional_float(name):
    val = os.getenv(name)
    if val is None or val == "":
        return None
    return float(val)


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    DATA_FILE = os.getenv("DATA_FILE", "form-submissions.json")
    SHORTLIST_FILE = os.getenv("SHORTLIST_FILE", "instance/shortlist.json")
    BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:5000")
    BACKEND_TIMEOUT = _optional_float("BACKEND_TIMEOUT")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SUCCESS_MESSAGE_TTL_MS = int(os.getenv("SUCCESS_MESSAGE_TTL_MS", "3000"))
    PORT = int(os.getenv("PORT", "5000"))
