"""
errorshield: error normalization and disclosure for FastAPI services.

Turns any failure raised while handling a request into an HTTP status
and a uniform ``{success, message, data}`` envelope.
"""
