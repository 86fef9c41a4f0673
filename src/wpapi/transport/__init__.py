# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Transports performing the HTTP calls built by wpapi requests.
"""

from .base import RequestMiddleware, TransportRequest, TransportResponse, WPTransport
from .httpx import HTTPXTransport

__all__ = [
    "HTTPXTransport",
    "RequestMiddleware",
    "TransportRequest",
    "TransportResponse",
    "WPTransport",
]
