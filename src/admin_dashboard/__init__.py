"""Admin summary view: aggregate counts and submissions-per-contest chart."""

__version__ = "0.1.0"
