"""Bounded integer stack and queue containers with postfix and sliding-window tools."""

__version__ = "0.1.0"
__all__ = ["stack", "fifo", "rpn", "window"]