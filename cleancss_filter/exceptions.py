from shlex import join as shell_join

from django.utils.encoding import smart_str


class FilterError(Exception):
    """
    This exception is raised when a filter fails
    """

    pass


class InterpreterNotFound(FilterError):
    """
    Raised when the configured interpreter or executable could not be
    resolved, i.e. the process exited with code 127.
    """

    pass


class FilterTimeout(FilterError):
    """
    Raised when the external process did not finish within the timeout.
    """

    pass


class FilterExecutionFailed(FilterError):
    """
    Raised when the external process exits with a non-zero code.

    Keeps the exit code, both output streams and the content that was fed
    to the process, so a failing minification can be replayed.
    """

    def __init__(self, command, returncode, error_output="", output="",
                 input=None):
        self.command = command
        self.returncode = returncode
        self.error_output = error_output
        self.output = output
        self.input = input
        super().__init__(self.build_message())

    def build_message(self):
        message = "An error occurred while running:\n%s" % shell_join(self.command)
        message += "\n\nError Output:\n%s" % self.error_output
        if self.output:
            message += "\n\nOutput:\n%s" % self.output
        if self.input:
            message += "\n\nInput:\n%s" % smart_str(self.input, errors="replace")
        return message
