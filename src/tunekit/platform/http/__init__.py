"""HTTP request engine.

This package holds the pieces every endpoint wrapper goes through:

- ``transport`` sends one request through a (possibly signing) session
- ``retry_policy`` decides whether and how long to wait before a retry
- ``errors`` defines the error taxonomy and decodes failed responses
- ``executor`` ties them together behind ``RequestExecutor``
"""
