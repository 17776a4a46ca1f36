"""Omar's Cousins - a joke-persona chatbot on top of an LLM API.

Combines FastAPI for the proxy endpoint, httpx for outbound calls,
NiceGUI for the chat interface, and Pydantic for data validation.

Components:
    - api: HTTP endpoints
    - proxy: Upstream chat-completions call and answer extraction
    - sessions: Chat session store with key-value persistence
    - ui: Web interface for chat interactions
    - models: Request/response and session schemas
"""

__version__ = "0.1.0"
