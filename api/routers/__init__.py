"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter that ``api.app.create_app`` includes.
"""
