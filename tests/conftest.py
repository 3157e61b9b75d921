from pytest import Item, fixture

from graphcalc.brain import Brain


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


def press(brain, *keys):
    '''
    Push each of keys: numbers as literals, symbols the brain knows as
    operators, anything else as a variable. Return the last result.
    '''
    result = None
    for key in keys:
        if isinstance(key, (int, float)):
            result = brain.push_literal(key)
        elif key in brain.vocabulary:
            result = brain.push_operator(key)
        else:
            result = brain.push_variable(key)
    return result


@fixture
def brain():
    return Brain()


@fixture
def push(brain):
    '''
    press() on the brain fixture.
    '''
    def push(*keys):
        return press(brain, *keys)
    return push
