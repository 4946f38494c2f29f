"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("VIC_DB_PATH", "vic_districts.duckdb")
DB_CONNECT_ATTEMPTS = int(os.getenv("VIC_DB_CONNECT_ATTEMPTS", "3"))

# Logging
LOG_DIR = Path(os.getenv("VIC_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("VIC_LOG_LEVEL", "INFO")

# API
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
API_VERSION = "1.0.0"
API_KEY = os.getenv("API_KEY") or None
API_KEY_MIN_LENGTH = 8

# Rate limiting (5000 requests per 15 minutes)
RATE_LIMIT_MAX_REQUESTS = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "5000"))
RATE_LIMIT_WINDOW_MS = int(os.getenv("RATE_LIMIT_WINDOW_MS", str(15 * 60 * 1000)))
RATE_LIMIT_MAX_CLIENTS = int(os.getenv("RATE_LIMIT_MAX_CLIENTS", "10000"))
RATE_LIMIT_SWEEP_EVERY = 1000
