#!/usr/bin/env python
"""Script to run the task API server."""
import os
import sys
from pathlib import Path

# Run from the repo root so relative sqlite paths and .env resolve there
script_dir = Path(__file__).resolve().parent
sys.path.insert(0, str(script_dir))
os.chdir(script_dir)

import uvicorn

from taskmanager.config import HOST, LOG_LEVEL, PORT

if __name__ == "__main__":
    uvicorn.run(
        "taskmanager.main:app",
        host=HOST,
        port=PORT,
        reload=True,
        log_level=LOG_LEVEL.lower(),
    )
