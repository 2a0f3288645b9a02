"""Exceptions raised for fatal conversion failures.

Data-quality problems in a bulletin are never raised; they are collected as
`Issue` records on the run context instead.
"""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for all fatal converter errors."""


class ConfigurationError(ConverterError):
    """Raised when required configuration is missing or malformed."""


class BulletinError(ConverterError):
    """Raised when a bulletin record cannot be decoded."""


class WikipediaApiError(ConverterError):
    """Raised when the MediaWiki API cannot be reached or returns an error."""


class WikipediaResponseError(WikipediaApiError):
    """Raised when a MediaWiki response is missing expected fields."""
