"""
Command Errors
Exceptions raised by the command registry, builder and dispatcher
"""


class ConsoleError(RuntimeError):
    '''
    An error that should be reported to the console user.
    '''


class DuplicateCommandError(ConsoleError):
    '''
    A command with the same name is already registered.
    '''

    def __init__(self, name: str):
        super().__init__(f"Command already registered: {name}")
        self.name = name


class CommandNotFoundError(ConsoleError):
    '''
    No command is registered under the given name.
    '''

    def __init__(self, name: str):
        super().__init__(f"Command {name} not found.")
        self.name = name


class InvalidCommandError(ConsoleError):
    '''
    A command definition was rejected when it was registered.
    '''


class MalformedArgumentsError(ConsoleError, ValueError):
    '''
    The arguments given to a command do not match its argument schema.
    '''


class ProtectedError(ConsoleError, AttributeError):
    '''
    Attempted to modify a field of a registered command.
    '''
