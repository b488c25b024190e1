"""Solicitations app package: customers' requests to rent a property."""
