# This project was developed with assistance from AI tools.
"""Request/response schemas for callers that serialize core results."""
