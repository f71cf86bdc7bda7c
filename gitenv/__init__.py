"""gitenv - Git developer-environment setup."""

__version__ = "1.0.0"
