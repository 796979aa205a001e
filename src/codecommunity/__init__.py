"""code-community - keep a contributor table in your README up to date."""

__version__ = "0.1.0"
