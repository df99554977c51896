"""Pytest configuration shared by unit and integration tests"""

import os
import sys
from pathlib import Path

# Add project root to path for src imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Console logging only during tests (src.main configures logging on import)
os.environ.setdefault("LOG_FILE", "")
