"""Repository implementations.

The abstract :class:`~src.domain.repositories.matches_repo.MatchStore` lives in
the domain layer; concrete adapters, such as the in-memory store under
:mod:`repositories.memory`, live here.
"""
