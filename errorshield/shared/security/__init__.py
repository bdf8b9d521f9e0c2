"""Request protection: rate limiting."""
