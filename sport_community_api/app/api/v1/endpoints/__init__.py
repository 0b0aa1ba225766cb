"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for a specific
domain (auth, media, posts, articles, events, sports, profiles).  The
routers are aggregated in ``router.py`` at the package level and then
included in the main application.

Handlers that reach the store or hash passwords are plain ``def``
functions: FastAPI runs them in its threadpool, so a slow query or a
bcrypt round only holds up the request that issued it.
"""
