"""Static asset server for the control panel.

Maps URL paths onto the asset root, answers unknown paths with a fixed
404 page, and binds on all interfaces so devices on the LAN can reach it.
"""

from wifimatrix.server.app import NOT_FOUND_HTML, create_app
from wifimatrix.server.network import resolve_local_ipv4
from wifimatrix.server.runner import BindFailure, start

__all__ = [
    "BindFailure",
    "NOT_FOUND_HTML",
    "create_app",
    "resolve_local_ipv4",
    "start",
]
