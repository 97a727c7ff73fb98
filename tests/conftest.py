import os

# Tracing is for real runs only
os.environ.setdefault("OPIK_TRACK_DISABLE", "true")
