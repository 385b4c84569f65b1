"""
Pydantic request/response schemas.

Python attributes are snake_case; the wire format is camelCase
(createdAt, totalItems, teacherId) through APIModel's alias generator.
"""
