

class CinderError(Exception):
    """ Base class for all Cinder errors"""
    kind = "error"


class CinderInvalidSymbol(CinderError):
    """ Raised when something other than a symbol is used as a name"""
    kind = "syntax"


class CinderUnboundSymbol(CinderError):
    """ Raised when a symbol is used before it is bound"""
    kind = "unbound"


class CinderSyntaxError(CinderError):
    """ Raised when there is a syntax error"""
    kind = "syntax"


class CinderArityError(CinderError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = "arity"


class CinderTypeError(CinderError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = "type"
