"""Service layer package housing core business logic.

Contains the JSON-backed document store, the pure document transforms,
the state service wrapping them in load/save cycles, and the LLM and
keyword classification helpers. Each service is reached from the routes.
"""
