"""Runtime configuration defaults for the menu app."""

from __future__ import annotations

DEBUG_LOG_PATH = "/tmp/chef-menu-debug.log"

# Acknowledgment fade timings.
FLASH_IN_SECONDS = 0.7
FLASH_OUT_SECONDS = 0.5
