"""Authentication bounded context.

Exchanges a user name and password for a signed bearer token, and resolves
the caller of each protected request from that token.
"""
