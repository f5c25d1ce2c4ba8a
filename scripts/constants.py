"""Constants for the project."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration
# ============================================================================
SCORING_YAML = PROJECT_ROOT / "config" / "scoring.yaml"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"
ALIGNMENTS_FOLDER = RESULTS_FOLDER / "alignments"
SUMMARY_CSV = RESULTS_FOLDER / "summary.csv"

# ============================================================================
# Output formatting
# ============================================================================
LABEL_WIDTH = 10
