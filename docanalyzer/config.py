import os
from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_TO_CONSOLE = os.getenv("LOG_TO_CONSOLE", "true").lower() == "true"
LOG_DIR = os.path.abspath(os.getenv("LOG_DIR", os.path.join("data", "logs")))

# Processing limits. The core never rejects large input; it truncates the
# normalized content to MAX_CONTENT_CHARS instead.
MAX_CONTENT_CHARS = int(os.getenv("MAX_CONTENT_CHARS", "2000000"))
PARALLEL_ANALYSIS = os.getenv("PARALLEL_ANALYSIS", "true").lower() == "true"
PROCESSING_TIMEOUT = float(os.getenv("PROCESSING_TIMEOUT", "60"))

# Upload cap, enforced by the HTTP layer only (10 MB like the web client)
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# API Configuration
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
