"""ai-commit: generate git commit messages from the staged diff."""

__version__ = "1.0.0"
