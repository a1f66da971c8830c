"""
Mart crowd forecast service.
"""
