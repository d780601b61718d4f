"""
PRESENTATION LAYER - HTTP surface (FastAPI routers and middleware).
"""
