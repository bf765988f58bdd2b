"""ReadMore data layer - Pocket account persistence and feature toggles."""

__version__ = "0.1.0"
