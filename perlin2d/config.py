import json
import os

# --- Permutation Table ---
PERMUTATION_SIZE = 256  # Must be a power of two

# --- Default Noise Settings ---
DEFAULT_SEED = 0
DEFAULT_BIAS = 0.0

# --- Paths ---
# Presets live next to this module so they ship with the package
BASE_PATH = os.path.dirname(os.path.abspath(__file__))
PRESETS_PATH = os.path.join(BASE_PATH, "presets.json")


def load_presets(path=PRESETS_PATH):
    """Load named generator settings from a JSON file."""
    with open(path, "r") as f:
        presets = json.load(f)

    # JSON has no tuples; the generator expects a (sx, sy) pair
    for settings in presets.values():
        if "scale" in settings:
            settings["scale"] = tuple(settings["scale"])
    return presets
