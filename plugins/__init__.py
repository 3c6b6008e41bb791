# plugins/__init__.py
from __future__ import annotations

"""Built-in command plugins for the portfolio shell."""

# Category packages in registry (and help / completion) order
LOAD_ORDER = ("system", "portfolio", "other")
