"""VEG24 Fresh - demo backend for a grocery storefront.

This package provides the in-memory product catalog, the demo phone-OTP
flow, admin statistics and locale bundles served by the web application.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
