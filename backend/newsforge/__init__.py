"""
Newsforge backend: layout fingerprinting and template synthesis for the
article publishing admin.
"""
