"""Core: domain models, interfaces, services and settings.

No CLI or rendering code lives here.
"""
