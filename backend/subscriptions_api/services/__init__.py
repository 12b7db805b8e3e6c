# Services package init
"""
Subscriptions API — Services Layer
====================================

What:  Storage logic sitting between routes (HTTP) and the database.
How:   Services take a session and plain inputs, run their statement, and
       return ORM objects or raise application exceptions.

Service Inventory:
    - SubscriptionService: create, list and delete-by-email
"""
