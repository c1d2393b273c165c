"""
mbitselect - detect the connected micro:bit and print its tinygo target
"""

__version__ = "1.0.0"
