"""Storefront - product catalog back office with bulk product import."""

__version__ = "0.4.0"
