from slowapi import Limiter
from slowapi.util import get_remote_address

from wedding_api.core.config import Settings

# Shared by the app state and the route decorators; create_app configures it
limiter = Limiter(key_func=get_remote_address)

_limits = {"login": "5/minute", "register": "3/minute"}


def configure_limiter(settings: Settings) -> None:
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    _limits["login"] = settings.LOGIN_RATE_LIMIT
    _limits["register"] = settings.REGISTER_RATE_LIMIT


def login_limit() -> str:
    return _limits["login"]


def register_limit() -> str:
    return _limits["register"]
