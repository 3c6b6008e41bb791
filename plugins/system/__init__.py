# plugins/system/__init__.py
from __future__ import annotations

"""
Simulated system utilities: screen control, echo, identity, clock and
kernel information.
"""

CATEGORY_DESCRIPTION = "Shell and system utilities."
