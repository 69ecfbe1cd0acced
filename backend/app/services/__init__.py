# Services package init
"""
Anythink Market Backend — Services Layer
=========================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services receive a database session from the route, perform their
       storage work and return schema objects or raise application exceptions.

Service Inventory:
    - CommentService: list / create / delete / update for comments
"""
