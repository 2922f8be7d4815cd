"""
Interfaces layer package.

FastAPI routers and Pydantic schemas. Routers delegate to use cases.
"""
