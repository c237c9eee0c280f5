# Routes package init
"""
AlgoTest Backend - API Routes Package
======================================

Route Inventory:
    - health.py:      GET  /health              (liveness)
    - info.py:        GET  /api/test            (welcome + endpoint listing)
    - algorithms.py:  GET  /api/algorithms      (catalog)
                      POST /api/run-algorithm   (execute one algorithm)

Routes stay thin: extract the body, call the dispatcher, return its model.
"""
