import os
from dotenv import load_dotenv

load_dotenv()

# --- LLM provider (server side only) ---
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "800"))
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

# Provider error text forwarded to clients is cut to this many characters
MAX_ERROR_CHARS = 500

# --- UI ---
API_URL = os.getenv("API_URL", "http://localhost:8000")
PDF_ENGINE = os.getenv("PDF_ENGINE", "pymupdf")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
