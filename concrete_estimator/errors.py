class InvalidReinforcementInput(ValueError):
    """
    Raised when a caller breaks the calculator input contract:
    non-positive spacing or stock length, unknown bar size, fiber type,
    duty level, unit or calculator kind.
    """
