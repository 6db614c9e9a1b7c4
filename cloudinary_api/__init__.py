"""Client library for the Cloudinary Admin and Upload APIs."""

from cloudinary_api.client import Cloudinary
from cloudinary_api.client import create
from cloudinary_api.client import create_from_params
from cloudinary_api.client import create_from_url
from cloudinary_api.client import get_default_client
from cloudinary_api.core.config import Configuration
from cloudinary_api.core.context import CallContext
from cloudinary_api.core.errors import CancelledError
from cloudinary_api.core.errors import CloudinaryError
from cloudinary_api.core.errors import ConfigurationError
from cloudinary_api.core.errors import DecodeError
from cloudinary_api.core.errors import ServiceError
from cloudinary_api.core.errors import TransportError

__all__ = [
    "CallContext",
    "CancelledError",
    "Cloudinary",
    "CloudinaryError",
    "Configuration",
    "ConfigurationError",
    "DecodeError",
    "ServiceError",
    "TransportError",
    "create",
    "create_from_params",
    "create_from_url",
    "get_default_client",
]
