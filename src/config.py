"""
Service configuration from environment variables

Load order: .env.local (local dev, highest priority), then .env,
then plain system environment.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    print(f"Loading environment from: {env_local}")
    load_dotenv(env_local, override=True)
elif env_file.exists():
    print(f"Loading environment from: {env_file}")
    load_dotenv(env_file, override=True)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "logs/docmind.log")  # empty = console only

# Server
PORT = int(os.getenv("PORT", "8080"))

# Retrieval
DEFAULT_TOP_K = int(os.getenv("RETRIEVAL_TOP_K", "6"))
MAX_TOP_K = int(os.getenv("RETRIEVAL_MAX_TOP_K", "50"))

if DEFAULT_TOP_K < 0 or DEFAULT_TOP_K > MAX_TOP_K:
    raise ValueError(
        f"RETRIEVAL_TOP_K must be between 0 and RETRIEVAL_MAX_TOP_K ({MAX_TOP_K}), got {DEFAULT_TOP_K}"
    )
