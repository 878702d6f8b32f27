"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
concern.  The routers are aggregated in ``api/router.py``.
"""
