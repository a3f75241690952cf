class InvalidDesignParametersError(ValueError):
    """
    Raised when a request would divide by zero inside the engine.

    Covers a zero design life (cost-per-year) and a zero initial investment
    (NPV ratio of the financial score).
    """

    def __init__(self, message: str, parameter: str):
        super().__init__(message)
        self.parameter = parameter
