"""Spring-driven cubic Bezier toy built on pygame-ce."""

__version__ = "0.1.0"
