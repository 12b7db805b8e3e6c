# Routes package init
"""
Subscriptions API — Routes Package
====================================

What:  HTTP route handlers, one module per concern.

Route Inventory:
    - greeting.py:       GET    /                               (plain-text greeting)
    - health.py:         GET    /health-check                   (liveness probe)
    - subscriptions.py:  POST   /subscription                   (create)
                         GET    /get-subscriptions              (list all)
                         DELETE /delete-subscriptions/{email}   (delete by email)

Routes stay thin: extract inputs, call the service, pick the status code.
"""
