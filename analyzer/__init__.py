"""
Elevator System Analyzer

Records what the building did on every tick and turns it into
summaries, JSON Lines event logs and trajectory diagrams.
"""

__version__ = "0.1.0"

from .statistics import Statistics

__all__ = ['Statistics']
