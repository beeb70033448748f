"""
Top-level package for the Marine Species Database API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn marine_species_api.app.main:app`` or ``python run.py``.
"""

__all__ = []
