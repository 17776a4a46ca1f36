"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Session list with "new chat" and selection
    - Transcript display with a thinking indicator
    - Question input that posts to the API

Session state lives in omars_cousins.sessions; this package only renders it.
"""
