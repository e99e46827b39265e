"""Internal modules for the Shodan SDK.

WARNING: This package contains the plumbing behind ShodanClient.
These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatch, decoding and error normalization
    http - Shared HTTP client configuration
    routes - API origins and path templates
"""
