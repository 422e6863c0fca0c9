class ExprtokError(Exception):
    """base class for exceptions in exprtok."""
    pass

class UnmatchedTokenError(ExprtokError, SyntaxError):
    """raised when no token rule matches at a position of the cleaned expression."""
    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f'Unexpected token at position {position}: "{character}"')

class RuleRegistrationError(ExprtokError):
    """raised when a rule can't be added to a tokenizer."""
    pass
