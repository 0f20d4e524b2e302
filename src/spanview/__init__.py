"""SpanView: live four-span job design diagram."""

__version__ = "0.1.0"
