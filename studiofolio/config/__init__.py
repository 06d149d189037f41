# studiofolio/config/__init__.py
"""
Configuration for Studiofolio.
"""
