from .utils.stack import Stack

__all__ = ["Stack"]
