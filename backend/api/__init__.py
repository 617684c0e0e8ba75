"""
HTTP routers. Each router is a thin adapter over one entity service.
"""
