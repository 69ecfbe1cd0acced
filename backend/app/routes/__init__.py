# Routes package init
"""
Anythink Market Backend — API Routes Package
=============================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - comments.py: GET/POST /comments, PUT/DELETE /comments/{id}
    - health.py:   GET /  (welcome)
                   GET /health  (service health check)

Routes stay thin: extract request data, call the service, pick the status
code. Failures travel as exceptions to the handlers in main.py.
"""
