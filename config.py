import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

# MongoDB
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "portfolio")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
UPLOADS_DIR = Path(os.getenv("UPLOADS_DIR", "uploads")).resolve()

# Shared secret for every write-class endpoint
ADMIN_TOKEN = os.getenv("ADMIN_TOKEN", "")

# Client side
LOCAL_API_URL = os.getenv("LOCAL_API_URL", "http://localhost:4000")
DEPLOYED_API_URL = os.getenv("DEPLOYED_API_URL", "https://portfolio-backend.onrender.com")
PORTFOLIO_API_URL = os.getenv("PORTFOLIO_API_URL", "")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
ADMIN_SESSION_FILE = Path(
    os.getenv("ADMIN_SESSION_FILE", str(Path.home() / ".portfolio-admin-session.json"))
)
ADMIN_SESSION_TTL_SECONDS = int(os.getenv("ADMIN_SESSION_TTL_SECONDS", "3600"))
