from .keyboards import Keyboard

__all__ = ["Keyboard"]
