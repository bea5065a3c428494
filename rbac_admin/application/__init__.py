"""Application layer: DTOs, repository protocols and services.

Depends only on domain and protocol definitions. Infrastructure
implements the interfaces (repositories, access resolution).
"""
