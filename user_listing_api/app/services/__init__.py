"""
Service layer abstraction.

Services encapsulate the business logic behind the API handlers and
talk to the database through ``core.db``.
"""
