import sys
from pathlib import Path

# backend/ holds top-level modules (main, config, repair, generator)
BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))
