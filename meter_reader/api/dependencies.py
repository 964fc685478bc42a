# External package imports
from fastapi import Request

# Local application imports
from ..di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at startup

    Returns:
        The BaseContainer stored on app.state by the lifespan handler
    """
    return request.app.state.container
