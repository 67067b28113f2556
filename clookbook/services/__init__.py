"""
Services Package

Business logic kept separate from HTTP handling (routers):
- books.py: Ownership-scoped book and reading session access
- rate_limiter.py: Rate limiting with slowapi
- security.py: Password hashing and identity token utilities
- users.py: Credential store (registration, lookups, authentication)
"""
