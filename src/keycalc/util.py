from functools import wraps


ERROR_TEXT = 'Error'
DISPLAY_PRECISION = 3


class CalcError(Exception):
    pass


class BufferFull(CalcError):
    '''
    Expression buffer has no room left for the key.
    '''


class ParseError(CalcError):
    '''
    Expression text contains something the lexer doesn't know.
    '''


class EvalError(CalcError):
    '''
    Division by zero, or operators and operands that don't pair up.
    '''


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts arithmetic exceptions to EvalErrors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise EvalError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def format_result(value, error=False, precision=DISPLAY_PRECISION):
    '''
    Format result for display: at most precision fractional digits, trailing
    zeros and a dangling decimal point stripped.

    An error shows as ERROR_TEXT, whatever the value.
    '''
    if error:
        return ERROR_TEXT
    text = '{0:.{1}f}'.format(value, precision)
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    # -0.0001 rounds to -0.000
    if text == '-0':
        text = '0'
    return text
