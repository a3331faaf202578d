# okta_lifecycle/__init__.py

__version__ = "0.1.0"
