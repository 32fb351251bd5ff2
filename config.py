import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///licences.db")
SECRET_KEY = os.getenv("SECRET_KEY", "dev")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Provider the form uses for generation (claude / gemini / chatgpt)
LICENSE_PROVIDER = os.getenv("LICENSE_PROVIDER", "claude")

# Where the form reaches the generation functions; never taken from the request
PORTAL_URL = os.getenv("PORTAL_URL", "http://127.0.0.1:5000")

STORAGE_KEY = "licenseRequests"

DURATION_OPTIONS = ["6 months", "1 year", "2 years", "5 years"]
