"""
Roster API: Routes Package
============================

Route Inventory:
    - students.py:  /students, /students/{id}   (built by resource.py)
    - teachers.py:  /teachers, /teachers/{id}   (built by resource.py)
    - health.py:    GET /health

Routes stay thin: read path/query/body, call the service, pick the status
code. Errors are raised by services and rendered by the handlers in main.py.
"""
