"""Business logic services for Storefront."""
