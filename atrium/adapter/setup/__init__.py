"""Setup diagnostics adapter."""

from .engine import SettingsSetupEngine

__all__ = ["SettingsSetupEngine"]
