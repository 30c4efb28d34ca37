# Routes package init
"""
Bookstore Backend — API Routes Package
========================================

Route Inventory:
    - authors.py:  /api/authors, /api/authors/{id}   (generic CRUD)
    - books.py:    /api/books,   /api/books/{id}     (generic CRUD)
    - health.py:   GET /health                        (service health check)

Shared building blocks:
    - crud.py:     build_crud_router(CrudResource)
    - handlers.py: handle_request(location) decorator (log / try / status code)
"""
