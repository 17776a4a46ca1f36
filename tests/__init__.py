"""Test package for Omar's Cousins.

Structure:
    - unit/: Config, proxy service, session store and model tests
    - integration/: HTTP API tests through the real FastAPI app

Upstream LLM calls are stubbed with httpx.MockTransport except where a test
is marked as requiring an API key.
Leverages pytest with pytest-check for soft assertions.
"""
