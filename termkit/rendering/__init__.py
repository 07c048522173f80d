"""Template rendering for deployed configuration files."""

from __future__ import annotations

from .renderer import (
    BUNDLED_TEMPLATES_DIR,
    DEPLOY_TARGETS,
    STARTUP_BLOCK_TEMPLATE,
    TemplateRenderer,
    build_context,
)

__all__ = [
    "BUNDLED_TEMPLATES_DIR",
    "DEPLOY_TARGETS",
    "STARTUP_BLOCK_TEMPLATE",
    "TemplateRenderer",
    "build_context",
]
