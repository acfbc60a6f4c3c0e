"""
Healthbook

A FastAPI service for booking appointments between patients and doctors,
with bearer-token authentication and role-scoped appointment management.
"""

__version__ = "1.0.0"
