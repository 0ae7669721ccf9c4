"""
Request pipeline middleware.

Applied around every route, outermost first:
error classification, admission control, timeout enforcement.
"""
