"""
HTTP layer: FastAPI application, routers and schemas.
"""
