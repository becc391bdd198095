# Services package init
"""
Customer Portal - Services Layer
==================================

What:  Logic sitting between the routes (HTTP) and the record store.

Service Inventory:
    - customer_service: id parsing, customer lookup, list/detail responses
    - html_renderer:    composes the landing page served at GET /
"""
