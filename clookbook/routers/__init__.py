"""
API Routers Package

Router Structure:
- auth.py: /api/auth/* endpoints (signup, login, logout)
- users.py: /api/me
- books.py: /api/books/* endpoints
- sessions.py: /api/books/{book_id}/sessions endpoints

Each router is imported and registered in main.py.
"""

from clookbook.routers.auth import router as auth_router
from clookbook.routers.books import router as books_router
from clookbook.routers.sessions import router as sessions_router
from clookbook.routers.users import router as users_router

__all__ = [
    "auth_router",
    "books_router",
    "sessions_router",
    "users_router",
]
