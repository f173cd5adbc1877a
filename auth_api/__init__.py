"""
Auth API

gRPC service exposing CRUD operations over the ``auth`` user table.
"""

__version__ = "0.1.0"
