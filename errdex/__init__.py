"""
errdex - Error Report Knowledge Base
"""

__version__ = "0.1.0"
