"""
Global registration settings loaded from environment variables.

All settings have sensible defaults so the service works out of the box.
Override via environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
