"""Monetary domain package.

This package contains the token-backed Currency, its Denominations and the
errors raised when either of them is misconfigured.
"""
