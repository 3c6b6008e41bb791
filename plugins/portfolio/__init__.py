# plugins/portfolio/__init__.py
from __future__ import annotations

"""Portfolio pages: projects, skills, about, contact and resume."""

CATEGORY_DESCRIPTION = "About the owner of this terminal."
