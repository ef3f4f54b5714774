"""
dialogflowcx-rest - Typed asynchronous client for the Dialogflow CX v3 REST API

This package contains the request dispatcher, the shared transport and the
typed records exchanged with the service.
"""

__version__ = "1.0.0"

from .client import DialogflowCX
from .auth import GoogleAuth
from .transport import GoogleApiError

__all__ = ["DialogflowCX", "GoogleAuth", "GoogleApiError"]
