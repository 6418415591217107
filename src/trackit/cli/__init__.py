"""CLI package.

The ``cli`` sub-package contains the click application and the rich
rendering helpers it uses.
"""
from __future__ import annotations
