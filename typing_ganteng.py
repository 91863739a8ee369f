# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "typing-ganteng",
# ]
#
# [tool.uv.sources]
# typing-ganteng = { path = "." }
# ///
"""Standalone launcher for the typing ganteng text stylizer."""

from ganteng.apps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
