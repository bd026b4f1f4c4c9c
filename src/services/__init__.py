"""Report and profile services used by handlers.

Handlers import these lazily so loading the router never opens HTTP sessions.
"""
