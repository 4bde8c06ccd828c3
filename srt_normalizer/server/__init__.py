"""HTTP API for the SRT normalizer (FastAPI app and Pydantic models)."""
