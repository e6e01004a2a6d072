"""slowroute: a tiny HTTP demo of layered request middleware.

A request logger and a request timeout guard wrap two route handlers; an
error translator turns every failure into an HTML response.
"""

__version__ = "0.1.0"
