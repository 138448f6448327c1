"""Storage location configuration package."""

from siloft_data.config.models import DataScope, StoreLocation

__all__ = ["DataScope", "StoreLocation"]
