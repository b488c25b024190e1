"""Contracts app package.

Rental contracts bind a customer to a property. Creating one marks the
property rented and deleting it makes the property available again.
"""
