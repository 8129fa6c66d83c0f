"""JWT service package."""

from .jwt_gen import JwtGeneratorService

__all__ = ["JwtGeneratorService"]
