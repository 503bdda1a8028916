"""Key and mouse-button models, an input DSL, platform key tables, packet framing, compression and networking helpers."""

__version__ = "0.1.0"