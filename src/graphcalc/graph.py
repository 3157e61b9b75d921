'''
Plotting a calculator's program as a function of one variable.
'''

import math

from .brain import Brain


def function(brain, variable=Brain.MEMORY):
    '''
    Return f(x): brain's topmost expression, with variable bound to x.

    f works on a private copy of brain, taken now. Later pushes to brain
    don't change f, and f binding variable doesn't touch brain.

    f answers None wherever the expression has no real, finite value.
    '''
    clone = brain.clone()

    def evaluate_at(x):
        clone.set_variable(variable, x)
        y = clone.evaluate()
        if y is None or not math.isfinite(y):
            return None
        return y
    return evaluate_at


def paths(evaluate_at, width, origin=(0, 0), points_per_unit=32.0, scale=1.0,
          step=1.0):
    '''
    Sample evaluate_at across pixel columns 0 <= px < width.

    Return an iterator over each unbroken run of points, as a list of
    (px, py) in view coordinates, y growing downwards. A column where the function is
    undefined ends the current run.

    :param origin: Where (0, 0) of function space is, in view coordinates.
    :param step: Pixel column spacing; 1 / content scale factor for retina.
    '''
    if not step > 0:
        raise ValueError('step must be positive, not {!r}'.format(step))
    return _paths(evaluate_at, width, origin, points_per_unit * scale, step)


def _paths(evaluate_at, width, origin, per_unit, step):
    ox, oy = origin
    path = []
    px = 0.0
    while px < width:
        fy = evaluate_at((px - ox) / per_unit)
        if fy is None:
            if path:
                yield path
            path = []
        else:
            path.append((px, oy - fy * per_unit))
        px += step
    if path:
        yield path
