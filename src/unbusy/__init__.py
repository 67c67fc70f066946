"""Unbusy: shared domain model for the RUET class-scheduling plugin."""

__version__ = "0.1.0"
