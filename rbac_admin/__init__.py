"""RBAC admin panel backend: modules, roles, navigation and permission matrix."""
