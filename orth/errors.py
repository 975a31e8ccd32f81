
class OrthError(Exception):
    """ Base class for all Orth errors"""
    pass


class OrthLexicalError(OrthError):
    """ Raised by the tokenizer; carries the 1-based line of the offending character"""
    kind = "lexical error"

    def __init__(self, line: int, message: str | None = None):
        super().__init__(f"line {line}: {message or self.kind}")
        self.line = line


class OrthUnfinishedString(OrthLexicalError):
    """ Raised when a string literal hits a newline or the end of input"""
    kind = "unfinished string"


class OrthInvalidSymbol(OrthLexicalError):
    """ Raised when a symbol is empty or contains '"' or ':'"""
    kind = "invalid symbol"


class OrthInvalidWord(OrthLexicalError):
    """ Raised when a word contains '"', ':', '{' or '}'"""
    kind = "invalid word"


class OrthUnboundWord(OrthError):
    """ Raised when a word has no binding in the environment"""
    pass


class OrthStackUnderflow(OrthError):
    """ Raised when a primitive needs more operands than the stack holds"""
    pass


class OrthTypeError(OrthError):
    """ Raised when an operand is not of the variant a primitive expects"""
    pass


class OrthIndexError(OrthError):
    """ Raised when a vector index is out of range"""
    pass


class OrthUnbalancedQuotation(OrthError):
    """ Reported for a stray '}' or a '{' that is never closed"""
    pass
