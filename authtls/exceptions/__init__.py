"""
=====================
Exceptions
=====================

.. currentmodule:: authtls.exceptions

Every exception raised by authtls derives from :class:`~authtls.exceptions.base.AuthTLSException` and carries an
``error_code``. Errors are split in two families:

- **User** errors (``USER:*``) are caused by the values a user supplied, on the command line, in the environment or in
  a config file. A malformed ``--experimental_credential_helper`` value is one of these. They are never retried and
  abort the configuration load.
- **System** errors (``SYSTEM:*``) point at a problem inside authtls itself.
"""
