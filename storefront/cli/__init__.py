"""Command line tools for Storefront."""
