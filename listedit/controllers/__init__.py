from .editor_controller import EditorController

__all__ = ["EditorController"]
