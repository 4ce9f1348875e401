class GenerationError(RuntimeError):
    """A level could not be completed because rejection sampling ran dry."""

    def __init__(self, level: str, message: str):
        super().__init__(f"{level}: {message}")
        self.level = level
        self.reason = message
