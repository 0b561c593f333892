from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from realestate.core.config import get_limiter_storage_uri

# Global Limiter instance to be imported by controllers
# enabled is decided in create_app() from RATE_LIMIT_ENABLED / TESTING
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per hour", "50 per minute"],
    storage_uri=get_limiter_storage_uri(),
    enabled=True,
)

# Stricter limit for endpoints that write
WRITE_LIMIT = "30 per minute"
