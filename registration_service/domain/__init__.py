"""
Domain layer: the User entity, repository and notification ports, and the
exception hierarchy. No framework or storage dependencies.
"""
