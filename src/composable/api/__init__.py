from composable.api.client import get_from_api

__all__ = ["get_from_api"]
