"""
FastAPI dependency injection for the lawyer store
"""

from fastapi import Request

from lawyermatch.services.lawyer_store import LawyerStore


def get_lawyer_store(request: Request) -> LawyerStore:
    """
    Dependency returning the application's lawyer store

    The store lives on ``app.state`` so tests can swap it with
    ``app.dependency_overrides[get_lawyer_store]``.
    """
    return request.app.state.lawyer_store
