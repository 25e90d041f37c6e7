"""
FastAPI routers grouped by concern (JSON api, html pages).

Each module exposes an APIRouter that app.py includes.
"""
