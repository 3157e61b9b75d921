from functools import wraps
import math


class CalcError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to warnings.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def ieee(f):
    '''
    Make float function f answer like C's libm rather than raise.

    math raises ValueError on a domain error, and OverflowError when the
    result doesn't fit a double. Those become NaN and infinity respectively.
    '''
    @wraps(f)
    def wrapper(*args):
        try:
            return f(*args)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return wrapper
