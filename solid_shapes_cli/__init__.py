"""
SOLID Shapes CLI - Command-line interface for the area calculator.

Usage:
    solid-shapes sum config/shapes.yaml
    solid-shapes volume config/shapes.yaml
    solid-shapes demo
    solid-shapes kinds
"""

__version__ = "1.0.0"
