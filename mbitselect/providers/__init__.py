"""
Providers module - hardware detection providers
"""
