# helpkit/__init__.py
# Manifest-driven usage help for multi-command CLIs

__version__ = "0.1.0"
