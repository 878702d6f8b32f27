"""
Service layer abstraction.

Services encapsulate data access for a domain.  Handlers talk to a
service instance rather than to the driver, so the MongoDB collection
can be swapped for an in‑memory double in tests.
"""
