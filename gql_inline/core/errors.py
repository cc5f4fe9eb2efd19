"""Exceptions raised by the inliner, splitter and compiler.

Syntax errors from the query-language parser are not wrapped here;
``graphql.GraphQLSyntaxError`` reaches the caller unchanged.
"""


class InlineError(Exception):
    """Base class for all gql-inline errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnresolvedFragmentError(InlineError):
    """A fragment spread names a fragment that is not defined in the document."""

    def __init__(self, fragment_name: str):
        self.fragment_name = fragment_name
        super().__init__(f'Fragment "{fragment_name}" not found')


class CyclicFragmentError(InlineError):
    """A fragment spreads itself, directly or through other fragments."""

    def __init__(self, path: list[str]):
        self.path = list(path)
        super().__init__(
            f"Cyclic fragment reference: {' -> '.join(self.path)}"
        )


class DuplicateFragmentError(InlineError):
    """The same fragment name is defined more than once (strict mode only)."""

    def __init__(self, fragment_name: str):
        self.fragment_name = fragment_name
        super().__init__(f'Fragment "{fragment_name}" is defined more than once')


class SplitError(InlineError):
    """Base class for errors raised while splitting raw definition text."""


class MalformedDefinitionError(SplitError):
    """A definition keyword is not followed by a name."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Could not parse definition name at position {position}")


class UnmatchedBraceError(SplitError):
    """Input ended before the body of a definition was closed."""

    def __init__(self, definition_name: str):
        self.definition_name = definition_name
        super().__init__(
            f"No matching closing brace found for definition {definition_name}"
        )


class CompilerError(InlineError):
    """The external relay compiler could not be run or exited with an error."""

    def __init__(self, message: str, stdout: str = "", stderr: str = ""):
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)
