"""FastAPI dependencies shared by the routers"""
from fastapi import Request
from app.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store owned by the running application"""
    return request.app.state.user_store
