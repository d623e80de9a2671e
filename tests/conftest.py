import os

# headless matplotlib for the drawing tests
os.environ.setdefault("MPLBACKEND", "Agg")
