# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "skill-slots",
# ]
#
# [tool.uv.sources]
# skill-slots = { path = "." }
# ///
"""Standalone slot inspection for saved voice intent requests."""

from skillslots.apps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
