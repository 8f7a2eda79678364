"""
Bearer-token verification and the per-request access guard.
"""
