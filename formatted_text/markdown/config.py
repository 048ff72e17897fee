# formatted_text/markdown/config.py

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

DEFAULT_MARKDOWN_OPTIONS = MappingProxyType(
    {
        "gfm": True,
        "tables": True,
        "breaks": False,
        "pedantic": False,
        "smart_lists": True,
        "sanitize": False,
        "smartypants": False,
        "silent": False,
    }
)


def get_markdown_config(overrides=None):
    """
    Rendering options for one markdown pass.

    Caller values win over DEFAULT_MARKDOWN_OPTIONS key by key. The result is
    read-only so every callback of a pass sees the same options.

    Note: mistune has no counterpart for "pedantic" or "smart_lists"; they are
    accepted so callers can pass the full option set, but change nothing.
    """
    config = dict(DEFAULT_MARKDOWN_OPTIONS)
    for key, value in (overrides or {}).items():
        if key not in DEFAULT_MARKDOWN_OPTIONS:
            logger.warning(f"Unknown markdown option '{key}' ignored by the renderer")
        config[key] = value
    return MappingProxyType(config)


def get_mistune_plugins(config):
    """Map the rendering options onto mistune plugin names."""
    plugins = []
    if config.get("gfm"):
        plugins.extend(["strikethrough", "url"])
        if config.get("tables"):
            plugins.append("table")
    return plugins
