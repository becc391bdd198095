# Routes package init
"""
Customer Portal - API Routes Package
======================================

Route Inventory:
    - home.py:       GET /                      (HTML landing page)
    - customers.py:  GET /api/customers         (all customers)
                     GET /api/customers/{id}    (single customer)
    - health.py:     GET /api/health            (liveness)
    - info.py:       GET /api/info              (static metadata)

Routes stay thin: they read the request, call a service and return the
response model. Lookup and rendering live in services/.
"""
