class ConfigError(ValueError):
    """Raised for invalid configuration or replay scenario entries"""
