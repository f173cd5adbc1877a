"""
User Management Module

Layered user management over the ``auth`` table:
- domain: Domain models and errors
- services: Validation and business logic
- repositories: Data access
- api: gRPC surface (user_v1)
"""
