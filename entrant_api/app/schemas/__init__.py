"""
Pydantic schema definitions for API payloads.

Schemas double as the stored record type: the record store keeps
immutable ``Entrant`` instances and hands them straight to the API
layer.
"""
