# plugins/other/__init__.py
from __future__ import annotations

"""Banner, neofetch, history and session exit."""

CATEGORY_DESCRIPTION = "Eye candy and session control."
