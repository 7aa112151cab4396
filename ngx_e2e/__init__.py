"""Page objects and helpers for the ngx-admin end-to-end suite."""

from .credentials import Credentials, valid_user_credentials
from .exceptions import ElementNotRenderedError, NgxE2EError, UserStoreError
from .slider import BoundingBox, SliderGeometry, SliderTarget, compute_slider_target
from .user_store import UserRecord, UserStore, generate_random_user

__all__ = [
    "BoundingBox",
    "Credentials",
    "ElementNotRenderedError",
    "NgxE2EError",
    "SliderGeometry",
    "SliderTarget",
    "UserRecord",
    "UserStore",
    "UserStoreError",
    "compute_slider_target",
    "generate_random_user",
    "valid_user_credentials",
]
