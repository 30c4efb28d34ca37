"""
Bookstore Backend — Application Package Initializer
=====================================================

Architecture Note:
    A layered book-catalog service plus the HTTP client its UI uses:

    ┌─────────────────────────────────────┐
    │   client/  (httpx repositories)     │  ← UI side, talks HTTP
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← status codes, logging
    ├─────────────────────────────────────┤
    │  Mapping + Schemas (DTOs)           │  ← wire contract
    ├─────────────────────────────────────┤
    │        Repositories                 │  ← one generic CRUD contract
    ├─────────────────────────────────────┤
    │   Models + Database (persistence)   │  ← async SQLAlchemy
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
