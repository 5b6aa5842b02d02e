"""
=====================
authtls
=====================

Authentication and TLS options for clients of remote caches and executors.

.. currentmodule:: authtls

.. autosummary::
   :nosignatures:
   :template: custom.rst
   :toctree: generated/

   AuthAndTLSOptions
   ScopedCredentialHelper
   parse_scoped_credential_helper
"""

from authtls.configuration import AuthAndTLSOptions, ScopedCredentialHelper, parse_scoped_credential_helper
from authtls.loggers import logger

__version__ = "0.0.0+develop"
