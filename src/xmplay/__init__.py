"""xmplay - browse and play tracks from xmplaylist.com."""

__version__ = "0.1.0"
