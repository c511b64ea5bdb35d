"""
Game configuration.

Every setting can be overridden from the environment.
"""

import os
from pathlib import Path

# Content
DEFAULT_WORLD_FILE = Path(__file__).parent / "world_data" / "cave.yaml"
WORLD_FILE = os.getenv("CAVERN_WORLD_FILE", str(DEFAULT_WORLD_FILE))

# Logging (stderr, kept quiet by default so it doesn't mix with game text)
LOG_LEVEL = os.getenv("CAVERN_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# REPL
PROMPT = os.getenv("CAVERN_PROMPT", "> ")
