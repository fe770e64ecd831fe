from .editor_view import build_editor_view

__all__ = ["build_editor_view"]
