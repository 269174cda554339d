"""
Pydantic schema definitions for API payloads.

Seed records (accounts, products) and the JSON envelopes returned by
the API are defined here.  Seed models are frozen so the in‑memory
tables cannot be modified once the process has started.
"""
