"""Backend package for the Cosmic Hatchery API.

This package provides the FastAPI web server that hatches creatures through
``hatchery.genetics`` and reports hatch statistics.
"""

__version__ = "1.0.0"
