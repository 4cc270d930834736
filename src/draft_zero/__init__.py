"""draft-zero -- forward-only writing surface with autosave."""

__version__ = '0.1.0'
