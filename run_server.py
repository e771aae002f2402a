"""
Form Assist Server Entry Point.

Usage:
    # HTTP API
    python run_server.py --transport http --port 3001

    # MCP over stdio
    python run_server.py --transport stdio

    # MCP over SSE
    python run_server.py --transport sse --port 8080
"""

import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from form_assist.cli import main


if __name__ == "__main__":
    main()
