"""
Measurement book module.

Stores one value per customer, clothing type and measurement definition.
"""
