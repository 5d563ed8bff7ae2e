"""
Endpoint and URI infrastructure.

Stateless helpers shared by every resource façade.
"""

from .endpoint import EndpointResolver
from .uri import build_list_query, build_uri, encode_query, list_query_pairs

__all__ = [
    "EndpointResolver",
    "build_uri",
    "build_list_query",
    "encode_query",
    "list_query_pairs",
]
