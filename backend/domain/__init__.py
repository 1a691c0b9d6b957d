"""Domain layer for the conference speakers backend.

Entities, ports and exceptions live here, decoupled from the GraphQL
presentation and from infrastructure adapters.
"""
