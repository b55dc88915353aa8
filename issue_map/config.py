import os

from dotenv import load_dotenv

load_dotenv()

# --- Upstream issue API (unset -> read local JSON files) ---
ISSUE_API_URL = os.environ.get("ISSUE_API_URL", "").rstrip("/")
ISSUE_API_TIMEOUT = float(os.environ.get("ISSUE_API_TIMEOUT", "10"))

# --- Local issue files ---
COMPLAINTS_FILE = os.environ.get("COMPLAINTS_FILE", "complaints.json")
COMMUNITY_ISSUES_FILE = os.environ.get("COMMUNITY_ISSUES_FILE", "community_issues.json")

# --- Map defaults ---
MAP_RADIUS_KM = float(os.environ.get("MAP_RADIUS_KM", "7"))
DEFAULT_CENTER_LAT = float(os.environ.get("DEFAULT_CENTER_LAT", "21.2514"))  # Raipur
DEFAULT_CENTER_LNG = float(os.environ.get("DEFAULT_CENTER_LNG", "81.6296"))

# --- Service ---
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "5000"))
