"""
Customers module (JSON API).

Scope:
- Customers CRUD (create + list + detail + update + delete)
- Field validation with all violations reported together
- Case-insensitive duplicate-email detection backed by a unique constraint
"""
