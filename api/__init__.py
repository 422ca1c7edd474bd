"""
Minimal API (FastAPI)

HTTP API for allowlist commitments:
- POST /tree/root - Compute the root commitment
- POST /tree/proof - Generate a membership proof
- POST /verify - Verify a proof against a root
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
