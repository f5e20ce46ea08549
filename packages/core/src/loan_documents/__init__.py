# This project was developed with assistance from AI tools.
"""Loan application document lifecycle and completeness core."""

__version__ = "0.1.0"
