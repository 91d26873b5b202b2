class SetupError(Exception):
    """Exception raised for configuration errors, such as missing connection settings."""

    def __init__(self, message: str, setting: str | None = None):
        self.message = message
        self.setting = setting
        """ Name of the environment variable or option at fault, if there is one. """
        super().__init__(self.message)
