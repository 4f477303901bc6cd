"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive the store they operate on, so the in‑memory container used
here can be swapped for a real backend without changing API handlers.
"""
