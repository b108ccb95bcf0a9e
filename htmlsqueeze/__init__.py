"""Best-effort optimizer for single-file static HTML pages."""

__version__ = "1.0.0"
