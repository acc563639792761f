from .todo import Todo

# Export all models for easy importing
__all__ = ["Todo"]
