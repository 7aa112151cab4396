"""Exceptions raised by the suite's fail-fast paths."""


class NgxE2EError(Exception):
    """Base exception for the ngx-admin suite"""
    pass


class ElementNotRenderedError(NgxE2EError):
    """An element has no bounding box (not rendered or not visible)"""
    pass


class UserStoreError(NgxE2EError):
    """The registered-user fixture file could not be read for an update"""
    pass
