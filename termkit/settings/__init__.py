"""Desktop settings writers."""

from __future__ import annotations

from .alternatives import AlternativesRegistrar
from .dconf import SettingsWriter, format_gvariant

__all__ = ["AlternativesRegistrar", "SettingsWriter", "format_gvariant"]
