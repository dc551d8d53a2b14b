"""Application layer for the social bounded context.

Services orchestrating profile and screech use cases, plus the ownership
policy shared by every mutation.
"""
