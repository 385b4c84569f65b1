"""
Roster API: Services Layer
============================

What:  CRUD logic between routes (HTTP) and the database.

Service Inventory:
    - ResourceService: generic create/list/get/update/delete over one model
      with an optional eager-loaded `courses` relation
    - student_service / teacher_service: the two configured instances

Services never build HTTP responses. They return schema objects or raise
NotFoundError / PersistenceError for the global handlers in roster.main.
"""
