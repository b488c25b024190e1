"""Properties app package.

This app holds the rentable units of the portfolio: the property model,
the management service, catalogue filters and the REST endpoints.
"""
