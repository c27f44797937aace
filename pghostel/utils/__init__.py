"""
Utility helpers shared by services.
"""
