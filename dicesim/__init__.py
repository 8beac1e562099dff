"""DiceSim: a dice rolling simulator with a library of small algorithm exercises."""

__version__ = "1.0.0"
