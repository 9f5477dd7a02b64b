"""
Translation Exceptions

This module contains the exception class shared by the whole package.
Kept separate to avoid circular imports between config and translation modules.
"""


class TranslationError(Exception):
    """Translation error with optional code and details."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}
