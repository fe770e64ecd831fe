"""Flet presentation layer for the list editor."""
