from dotenv import load_dotenv
import os

# Load environment variables from a .env file
load_dotenv()

# Retrieve parts of the database URL from environment variables
DB_USER = os.getenv("DB_USERNAME", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_HOST = os.getenv("DB_HOST")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_NAME = os.getenv("DB_NAME", "text_submissions")
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in ("true", "1", "yes")

# Server settings
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:4200").split(",")
    if origin.strip()
]

# Text bounds. The server bound protects the table, the client bound is the
# stricter one the form and the dashboard editor enforce before calling the API.
TEXT_MAX_LENGTH = int(os.getenv("TEXT_MAX_LENGTH", 1000))
CLIENT_TEXT_MIN_LENGTH = int(os.getenv("CLIENT_TEXT_MIN_LENGTH", 10))
CLIENT_TEXT_MAX_LENGTH = int(os.getenv("CLIENT_TEXT_MAX_LENGTH", 50))

# Client settings
API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", 10))

# Build the database URL
if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.getenv("DATABASE_URL")
elif DB_HOST:
    DATABASE_URL = f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    DATABASE_URL = "sqlite:///./text_submissions.db"
