"""
holemask CLI - Command-line interface for hole geometry.

Usage:
    holemask-cli boundary config/holes/rectangle.yaml
    holemask-cli resolve config/holes/circle.yaml --container 1000x800
    holemask-cli regions config/holes/square.yaml
    holemask-cli click config/holes/circle.yaml 50 50
"""

__version__ = "1.0.0"
