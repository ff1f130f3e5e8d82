from functools import wraps


class EvalError(Exception):
    '''
    Any failure evaluating a single expression.

    Fatal to that evaluation only; the CLI reports it and carries on.
    '''

    MESSAGE = 'Cannot evaluate at position {position}'

    def __init__(self, position, *args):
        self.position = position
        super().__init__(self.MESSAGE.format(position=position), *args)

    def __str__(self):
        return self.args[0]


class UnexpectedToken(EvalError):
    MESSAGE = "Unexpected token at position {position}: {character!r}"

    def __init__(self, position, character, *args):
        self.position = position
        self.character = character
        Exception.__init__(self,
                           self.MESSAGE.format(position=position,
                                               character=character),
                           *args)


class DivisionByZero(EvalError):
    MESSAGE = 'Division by zero at position {position}'


class UnmatchedParenthesis(EvalError):
    MESSAGE = 'Missing closing parenthesis at position {position}'


class ExpectedNumber(EvalError):
    MESSAGE = 'Expected a number at position {position}'


class MalformedNumber(EvalError):
    MESSAGE = 'Invalid number format at position {position}'


class NumberConversionError(EvalError):
    MESSAGE = 'Number conversion error at position {position}'


class TooDeeplyNested(EvalError):
    MESSAGE = 'Expression nested too deeply at position {position}'


def wrap_user_errors(error_type, position):
    '''
    Decorator that converts stray exceptions to an EvalError.

    ``position`` picks the reported position out of the wrapped call's
    arguments. Passes through EvalErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except EvalError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise error_type(position(*args, **kwargs), e) from e
        return wrapper
    return decorator
