"""
Exceptions raised while dumping a wiki table into a database.

Every error is fatal to the run; the controller catches WikiTableError
and reports its message.
"""


class WikiTableError(Exception):
    """Base class for all failures of the table dump pipeline."""

    default_message = "Wiki table dump failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class TableNotFound(WikiTableError):
    default_message = "Table element not found"


class TableBodyNotFound(WikiTableError):
    default_message = "Table Body not found"


class TableHeaderNotFound(WikiTableError):
    default_message = "Table header was not found"


class HeaderAndTypesAmountMismatch(WikiTableError):
    default_message = "Headers and types must be the same length"


class UnableToReachPage(WikiTableError):
    default_message = "Unable to reach page"


class UnsuccessfulRequest(WikiTableError):
    default_message = "Request did not respond with a 200"


class ResponseBodyError(WikiTableError):
    default_message = "Failed to get body from response"


class DatabaseConnectionError(WikiTableError):
    default_message = "Failed to connect to sqlite3 database"


class StatementError(WikiTableError):
    """
    A statement was rejected by the database.
    The offending SQL is kept on the exception and appended to the message.
    """

    def __init__(self, reason, statement: str):
        self.reason = reason
        self.statement = statement
        super().__init__(f"{self.default_message}: {reason}\nSQL Statement: {statement}")


class CreateTableError(StatementError):
    default_message = "Failed to create table"


class InsertError(StatementError):
    default_message = "Failed to insert data into database"
