"""
Feature modules live under this package.

Each module owns its routes, validation, persistence and service layer, and
reuses the platform primitives (config, DB session) from ``app.customer_api``.
"""
