"""Utility helpers for scalarconf."""
