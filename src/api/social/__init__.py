"""Social bounded context.

Owns user profiles and screeches: the in-memory stores, the data repository
composing them, the ownership rules for mutations and the HTTP routes.
"""
