class ActionError(Exception):
    """Error yang ditampilkan apa adanya ke operator sebagai hasil action gagal."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class MissingParameter(ActionError):
    pass


class InvalidParameter(ActionError):
    pass


class UnknownAction(ActionError):
    pass


class ResourceNotFound(ActionError):
    pass


class ResourceUnreadable(ActionError):
    pass


class ExternalCommandFailure(ActionError):
    """Command keluar dengan exit code != 0. Pesannya adalah output command itu sendiri."""

    def __init__(self, command: str, exit_code: int, output: str):
        super().__init__(output)
        self.command = command
        self.exit_code = exit_code
