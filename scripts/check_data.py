"""Load the CSV exports the way the app does and report what was skipped.

Usage: python scripts/check_data.py [MUSCLE_CSV] [EXERCISE_CSV]
"""

import os
import sys

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from app.core.config import get_settings
from app.core.exceptions import LoadFailure
from app.services.exercise_catalog import load_catalog
from app.services.resolver import resolve_groups


def main() -> int:
    settings = get_settings()
    muscle_path = sys.argv[1] if len(sys.argv) > 1 else settings.muscle_correlations_path
    exercise_path = sys.argv[2] if len(sys.argv) > 2 else settings.exercise_data_path

    try:
        catalog = load_catalog(muscle_path, exercise_path)
    except LoadFailure as e:
        print(f"Load failed: {e}")
        return 1

    print(f"Muscle heads: {len(catalog.index)}  groups: {', '.join(catalog.index.groups)}")
    print(f"Exercises: {len(catalog.exercises)}")
    for w in catalog.all_warnings:
        print(f"  warning: {w}")

    unresolved = [ex for ex in catalog.exercises if not resolve_groups(ex, catalog.index)]
    for ex in unresolved:
        print(f"  no muscle group: {ex.exercise_id} {ex.exercise_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
