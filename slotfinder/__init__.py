"""
slotfinder - find common free meeting slots within a workday.
"""

__version__ = "0.1.0"
