from .token_service import JwtTokenService

__all__ = ["JwtTokenService"]
