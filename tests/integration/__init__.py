"""Integration tests for the API working as a system.

Requests go through the real FastAPI app via httpx ASGITransport.
"""
