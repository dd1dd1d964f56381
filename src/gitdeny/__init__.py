"""gitdeny — block sensitive files before they reach your repository."""

__version__ = "0.1.0"
