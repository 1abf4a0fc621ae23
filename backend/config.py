"""
Backend Configuration

API settings and session limits.
"""

import os

# API Settings
API_TITLE = "Registration Form Service"
API_DESCRIPTION = "Validates registration form submissions and keeps an in-memory table of accepted entries"
API_VERSION = "1.0.0"

# Backend
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "10821"))

# Session storage
MAX_SESSIONS = max(1, int(os.getenv("MAX_SESSIONS", "1000")))

# Verbose logging
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
