"""Validators for add-on metadata, with a runner and OCM and registry clients."""

__version__ = "0.1.0"