from .identity import FrontendIdentity, FrontendIdentityResolver

__all__ = ["FrontendIdentity", "FrontendIdentityResolver"]
