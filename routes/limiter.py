from slowapi import Limiter
from slowapi.util import get_remote_address

from config import get_settings

# Shared limiter instance for route decorators; create_app() also registers it on app.state
limiter = Limiter(key_func=get_remote_address, enabled=get_settings().rate_limit_enabled)
