"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
MAX_TEXT_LOG_CHARS: int = int(os.getenv("MAX_TEXT_LOG_CHARS", "80"))

# --- Batch runner ---
VALIDATE_OUTPUT: bool = os.getenv("VALIDATE_OUTPUT", "true").lower() == "true"
