"""
Clothing catalog module.

Reference data: clothing types, the fixed list of measurement
definitions, and the per-garment measurement templates.
"""
