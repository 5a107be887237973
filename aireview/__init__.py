"""aireview: pull request review comment threads for an automated reviewer."""

__version__ = "0.1.0"
