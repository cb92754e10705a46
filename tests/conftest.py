import os, sys
from pathlib import Path

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Ensure required environment variables for Core()
os.environ.setdefault("MATRIX_HOMESERVER_URL", "https://matrix.test")
os.environ.setdefault("MATRIX_ACCESS_TOKEN", "test-token")
os.environ.setdefault("MATRIX_USER_ID", "@herald:matrix.test")
os.environ.setdefault("MONITORED_ROOM_ID", "!monitored:matrix.test")
os.environ.setdefault("FORWARDING_ROOM_ID", "!forward:matrix.test")
os.environ.setdefault("AI_API_KEY", "test-ai-key")

# Never pick up a developer's local config.toml
os.environ.setdefault("LINK_HERALD_CONFIG", str(Path(__file__).resolve().parent / "missing-config.toml"))
