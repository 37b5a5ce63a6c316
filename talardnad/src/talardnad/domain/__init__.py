"""
Domain layer: entities, exceptions, repository and service interfaces.
"""
