"""
API route modules
"""

__all__ = ["lawyers"]
