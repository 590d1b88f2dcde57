import logging
from pathlib import Path

DATA_DIR = Path.home() / ".pooptrack"
STORAGE_FILE = DATA_DIR / "storage.json"
STORAGE_KEY = "pooping_entries"

KINDS = ("Normal", "Accident", "Failed")

# Fixed kind -> rating mapping
RATINGS = {
    "Normal": 5,
    "Accident": 1,
    "Failed": 1,
}

# --- Calendar colours ---

SELECTED_COLOR = "#667eea"
DOT_COLORS = {
    "Normal": "#48bb78",
    "Accident": "#8B4513",
    "Failed": "#e53e3e",
}
DOT_PREFIX = {
    "Normal": "poop",
    "Accident": "accident",
    "Failed": "failed",
}

# --- Terminal legend ---

SYMBOLS = {
    "Normal": "✓",
    "Accident": "💩",
    "Failed": "✗",
}
LABELS = {
    "Normal": "Successful poops",
    "Accident": "Accidents",
    "Failed": "Failed attempts",
}

BRISTOL_SCALE = {
    1: "Separate hard lumps, like nuts (hard to pass)",
    2: "Sausage-shaped but lumpy",
    3: "Like a sausage but with cracks on its surface",
    4: "Like a sausage or snake, smooth and soft",
    5: "Soft blobs with clear-cut edges (passed easily)",
    6: "Fluffy pieces with ragged edges, a mushy stool",
    7: "Watery, no solid pieces, entirely liquid",
}

SAVE_FAILED_TITLE = "Error"
SAVE_FAILED_MESSAGE = "Failed to save entries"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
