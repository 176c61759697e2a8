# IN THIS FILE: ERRORS RAISED FOR CALLER CONTRACT VIOLATIONS


class ConfigError(ValueError):
    """
    Raised before any search starts when the grid, the endpoints or the
    run limits are malformed. An unreachable goal is NOT a ConfigError.
    """
