"""Interaction modes gating what a click on a list row does."""

from enum import Enum


class Mode(str, Enum):
    """Row interaction style"""
    NORMAL = "normal"   # Rows are display-only
    DELETE = "delete"   # Clicking a row removes it
    EDIT = "edit"       # Clicking a row opens it for in-place editing
