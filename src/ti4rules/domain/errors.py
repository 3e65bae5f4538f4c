"""Exceptions raised by the rules core."""

from __future__ import annotations


class RulesError(Exception):
    """Base class for rules-core failures."""


class ConfigurationError(RulesError):
    """Rule data is inconsistent (duplicate triggers, mismatched upgrades).

    Raised eagerly while building registries or applying catalog data and
    never retried.
    """


class ParseError(RulesError, ValueError):
    """A namespaced object id or color string could not be parsed."""
