"""
Identicon generator.
Turns any string into a small symmetric PNG fingerprint.
"""
