"""
util Subpackage

Tracing output and text parsing helpers.
"""
