"""Domain layer for the social bounded context."""
