# ============================================================================
# RescueTower - Sinks Package
#
# Purpose: Output backends for session reports
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from RescueTower.sinks import LocalFileSink
#
# Changelog:
#   2026-03-04: Initial sinks package
# ============================================================================

from RescueTower.sinks.local_file import LocalFileSink

__all__ = ["LocalFileSink"]
