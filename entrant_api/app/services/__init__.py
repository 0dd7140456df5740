"""
Service layer abstraction.

The record store encapsulates all state and business rules for
entrants.  API handlers depend on the abstract ``EntrantStore`` so the
in‑memory implementation can be swapped out (for example with a fake
in tests) without changing the routes.
"""
