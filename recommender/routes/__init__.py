"""
FastAPI routers.

Each module defines a router for one surface: the HTML page, the JSON
recommendation API, the product catalog and the health check.
"""
