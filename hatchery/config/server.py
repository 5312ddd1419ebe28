"""Server configuration constants."""

# Server Configuration
DEFAULT_API_PORT = 8000  # Default port for FastAPI backend

# Upper bound on creatures hatched by one batch request
MAX_BATCH_HATCH = 100
