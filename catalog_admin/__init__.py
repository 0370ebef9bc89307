"""
Catalog Admin client.

Session handling, the authenticated request gateway, entity services and the
page controllers of the Users, Products and Product Categories admin pages.
"""

__version__ = "0.1.0"
