"""
Application layer: DTOs, input validation and use cases that orchestrate the
domain through its repository and notification ports.
"""
