"""
Bot Forge core: config, session facade, bot context, dashboard.
"""

__version__ = "1.0.0"
