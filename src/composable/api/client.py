"""Partially applied JSON API getters.

``get_from_api`` is curried over the base URL, the endpoint and the
callback, so the first two can be baked in once and reused::

    get_github = get_from_api("https://api.github.com")
    get_github_users = get_github("/users")

    logins = get_github_users(lambda users: [u["login"] for u in users])

Each request is a plain blocking ``GET``. Failures are logged and raised as
:class:`~composable.exceptions.ApiError`; nothing is retried.
"""

import typing as tp

import requests

from composable.core.config import settings
from composable.exceptions import ApiError
from composable.logger.logger import get_logger

logger = get_logger("api")

__all__ = ["get_from_api"]

R = tp.TypeVar("R")


def _fetch_json(session: requests.Session, url: str, timeout: float) -> tp.Any:
    logger.debug(f"GET {url}")
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.JSONDecodeError as exc:
        logger.error(f"Response from {url} is not valid JSON: {exc}")
        raise ApiError(url, "invalid JSON body") from exc
    except requests.RequestException as exc:
        logger.error(f"Request to {url} failed: {exc}")
        raise ApiError(url, str(exc)) from exc
    except ValueError as exc:
        logger.error(f"Response from {url} is not valid JSON: {exc}")
        raise ApiError(url, "invalid JSON body") from exc


def get_from_api(
    base_url: str,
    session: tp.Optional[requests.Session] = None,
    timeout: tp.Optional[float] = None,
) -> tp.Callable[[str], tp.Callable[[tp.Callable[[tp.Any], R]], R]]:
    """Curried JSON getter.

    Args:
        base_url: Scheme and host shared by every endpoint, e.g.
            ``"https://api.github.com"``.
        session: Session used for the requests. A new ``requests.Session``
            is created per request when omitted.
        timeout: Seconds to wait for the server. Defaults to
            ``settings.HTTP_TIMEOUT``.

    Returns:
        A function taking an endpoint path, which returns a function taking
        a callback. Calling that last function performs the request and
        returns ``callback(decoded_json)``.
    """
    timeout = settings.HTTP_TIMEOUT if timeout is None else timeout

    def with_endpoint(endpoint: str):
        url = f"{base_url}{endpoint}"

        def with_callback(callback: tp.Callable[[tp.Any], R]) -> R:
            if session is not None:
                data = _fetch_json(session, url, timeout)
            else:
                with requests.Session() as own_session:
                    data = _fetch_json(own_session, url, timeout)
            return callback(data)

        return with_callback

    return with_endpoint
