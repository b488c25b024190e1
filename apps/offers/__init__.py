"""Offers app package: percentage discounts applied to property prices."""
