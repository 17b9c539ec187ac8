"""
Client for the optional remote sequence service.

Operations that are not implemented locally can be forwarded to a
service exposing the same result shapes.
"""

from biotools.service.client import ServiceClient

__all__ = ["ServiceClient"]
