"""YAML-based per-wiki option profiles.

A profile file looks like::

    default:
      imageOptions:
        minWidth: 32
        minHeight: 32
    domains:
      minecraft.wiki:
        linkOptions:
          baseUrl: https://minecraft.wiki
      zh.minecraft.wiki:
        removeSelectors: [".navbox", ".mw-editsection"]

The ``domains`` entry whose key equals, or is the longest parent domain of,
the host of the given base URL is merged over ``default``.  The result is a
mapping of option overrides for :class:`~wikiextract.parser.WikiPageParser`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from wikiextract.extractors.urlnorm import extract_domain

logger = logging.getLogger(__name__)


class ProfileError(ValueError):
    """The profile file is not shaped like a profile."""


def _section(data: Mapping[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ProfileError(f"{path}: '{key}' must be a mapping")
    return dict(value)


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def _domain_overrides(domains: Mapping[str, Any], host: str, path: Path) -> dict[str, Any]:
    """Return the overrides of the most specific domain entry covering *host*."""
    best = ""
    chosen: Any = None
    for domain in domains:
        key = str(domain).lower()
        if _host_matches(host, key) and len(key) > len(best):
            best = key
            chosen = domain
    if not best:
        return {}
    overrides = domains[chosen]
    if not isinstance(overrides, Mapping):
        raise ProfileError(f"{path}: entry for '{chosen}' must be a mapping")
    logger.debug("profile %s: using domain entry %r for host %r", path, chosen, host)
    return dict(overrides)


def load_profile(path: str | Path, base_url: str) -> dict[str, Any]:
    """Load YAML profile and return merged option overrides for *base_url*.

    Raises:
        OSError: the file can't be read.
        yaml.YAMLError: the file is not valid YAML.
        ProfileError: the document is not a ``default``/``domains`` mapping.
    """
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ProfileError(f"{path}: top level must be a mapping")

    overrides = _section(data, "default", path)
    domains = _section(data, "domains", path)
    overrides.update(_domain_overrides(domains, extract_domain(base_url), path))
    return overrides
