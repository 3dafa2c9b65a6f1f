"""
Notekeeper Backend - user accounts and notes over HTTP/JSON

Bearer-token authentication with an ownership rule for notes.
"""

__version__ = "1.0.0"
