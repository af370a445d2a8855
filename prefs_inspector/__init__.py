"""Inspector/editor for persistent key/value settings stores."""

__version__ = "0.3.0"
