"""
auth — User authentication module.

Provides:
  • JWT token creation & verification (PyJWT)
  • Password hashing (bcrypt)
  • Register / Login API routes
  • ``require_token`` FastAPI dependency
"""
