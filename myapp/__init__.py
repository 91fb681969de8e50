"""MyApp: probe and secrets-status service for EKS."""

__version__ = "1.0.0"
