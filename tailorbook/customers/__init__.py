"""
Customer registry module.

Tracks the shop's customers by unique name.
"""
