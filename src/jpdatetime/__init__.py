"""jpdatetime — Japanese-locale, Asia/Tokyo date/time values."""

from jpdatetime.domain.value import JstDateTime

__version__ = "0.1.0"

__all__ = ["JstDateTime", "__version__"]
