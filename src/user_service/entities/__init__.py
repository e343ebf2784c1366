"""Entities organised by aggregate.

``domain.py`` holds the linked domain aggregates. Each aggregate then has its
own package with:

- table.py: Database persistence model
- repository.py: Data access layer

Import from the aggregate package, e.g. ``entities.core.user``.
"""
