"""Parsers and protocols for external data sources."""

from .interfaces import HTTPClientProtocol, ParsingError, StatsClientProtocol
from .submission_stats_parser import SubmissionStatsParser

__all__ = [
    "HTTPClientProtocol",
    "ParsingError",
    "StatsClientProtocol",
    "SubmissionStatsParser",
]
