"""
cadgeo CLI - Command-line interface for the geometry engine and editor.

Usage:
    cadgeo-cli benchmark --iterations 1000 --workloads
    cadgeo-cli metrics circle --radius 1 --segments 1000
    cadgeo-cli render --shapes square circle --seed 7
    cadgeo-cli replay config/scenarios/drag_demo.yaml
"""

__version__ = "1.0.0"
