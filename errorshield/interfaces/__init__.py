"""
Interface layer package.

HTTP routers and response schemas.
"""
