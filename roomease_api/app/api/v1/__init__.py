"""
Version 1 of the API.

This subpackage bundles the public endpoints.  They are mounted under
``/api`` without a version segment because existing clients call
``/api/properties`` directly; a future ``v2`` would be mounted under
its own prefix.
"""
