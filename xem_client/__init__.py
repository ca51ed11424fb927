"""Client for the XEM episode mapping API."""

from .xem_api import XEMAPI
from .models import ANIDB, SCENE, TVDB, ORIGINS, AlternateName, Envelope, Episode, Mapping
from .exceptions import (
    XEMError,
    XEMRequestError,
    XEMBodyReadError,
    XEMHTTPError,
    XEMDecodeError,
    XEMRequestFailedError,
)

__all__ = [
    'XEMAPI',
    'ANIDB',
    'SCENE',
    'TVDB',
    'ORIGINS',
    'AlternateName',
    'Envelope',
    'Episode',
    'Mapping',
    'XEMError',
    'XEMRequestError',
    'XEMBodyReadError',
    'XEMHTTPError',
    'XEMDecodeError',
    'XEMRequestFailedError',
]
