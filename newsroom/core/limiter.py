"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings and decorators
keep rate limits DRY. Enabled/disabled from settings in create_app().
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
LOGIN_LIMIT = "5/15minutes"
OTP_LIMIT = "5/15minutes"
WRITE_ENDPOINT_LIMIT = "120/minute"
UPLOAD_LIMIT = "30/minute"
SUBSCRIBE_LIMIT = "10/minute"

limit_login = limiter.limit(
    LOGIN_LIMIT, error_message="Too many login attempts. Please try again later."
)
limit_otp = limiter.limit(
    OTP_LIMIT, error_message="Too many OTP requests. Please try again in 15 minutes."
)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_upload = limiter.limit(UPLOAD_LIMIT)
limit_subscribe = limiter.limit(SUBSCRIBE_LIMIT)
