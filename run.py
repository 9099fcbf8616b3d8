#!/usr/bin/env python3
"""Run Streamlit dashboard. Extra args are passed to streamlit (e.g. --server.port 8502)."""

import subprocess
import sys
from pathlib import Path

from settings import DB_PATH

if not Path(DB_PATH).exists():
    sys.exit(f"No database at {DB_PATH}. Run 'python load_data.py' first.")

app = Path(__file__).parent / "web" / "streamlit" / "app.py"
sys.exit(subprocess.run([sys.executable, "-m", "streamlit", "run", str(app), *sys.argv[1:]]).returncode)
