"""Constants for stdout reporting and process exit codes."""

from __future__ import annotations

RESULTS_BANNER: str = "========== RESULTS =========="
STATUS_GOOD: str = "GOOD"
STATUS_BAD: str = "BAD"

EXIT_SUCCESS: int = 0
EXIT_CHECK_FAILED: int = 1
EXIT_ERROR: int = 255
