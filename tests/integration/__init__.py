"""
Integration tests: correlation, logging and the HTTP client working
together against a local HTTP server.
"""
