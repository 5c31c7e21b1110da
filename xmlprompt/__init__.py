"""XML Prompt Generator - build copyable XML prompt specifications."""

__version__ = "0.1.0"
