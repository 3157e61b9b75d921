'''
Calculator state tests: pushes, undo, clearing, snapshots.
'''

import json
import math

from graphcalc.brain import Brain
from graphcalc.rendering import MAX_PRECEDENCE
from graphcalc.tokens import (Value, Error, ErrorKind, Literal, Variable,
                              Constant, UnaryOp)

from conftest import press

from pytest import mark


def test_push_answers_result(brain):
    assert brain.push_literal(3) == Value(3)
    assert brain.push_variable('x') == Error(ErrorKind.UNDEFINED_VARIABLE)
    assert brain.push_operator('+') == Error(ErrorKind.UNDEFINED_VARIABLE)


def test_unknown_operator_ignored(brain, push):
    push(2, 3)
    before = brain.snapshot()
    assert brain.push_operator('%') == Value(3)
    assert brain.snapshot() == before


def test_unknown_operator_on_empty(brain):
    assert brain.push_operator('nope') == Error(ErrorKind.MISSING_OPERAND)
    assert brain.stack == []


@mark.parametrize('keys', [
    (1,),
    (2, 3, '+'),
    (2, 'x', '×', 'sin', 4),
    ('π', '√', '±'),
])
def test_undo(brain, keys):
    snapshots = [brain.snapshot()]
    for key in keys:
        press(brain, key)
        snapshots.append(brain.snapshot())
    for expected in reversed(snapshots[:-1]):
        brain.undo()
        assert brain.snapshot() == expected


def test_undo_empty(brain):
    brain.set_variable('x', 1)
    before = brain.snapshot()
    brain.undo()
    assert brain.snapshot() == before


def test_undo_keeps_variables(brain, push):
    brain.set_variable('x', 2)
    push('x', 3, '+')
    brain.undo()
    assert brain.get_variable('x') == 2
    assert brain.evaluate() == 3


def test_clear(brain, push):
    push(1, 'x', '+')
    brain.set_variable('x', 1)
    brain.clear_stack()
    assert brain.stack == []
    assert brain.get_variable('x') == 1
    push(1)
    brain.clear_variables()
    assert brain.get_variable('x') is None
    assert brain.stack == [Literal(1.0)]
    brain.set_variable('x', 1)
    brain.clear()
    assert brain.snapshot() == {'stack': [], 'vars': {}}


def test_variables(brain):
    assert brain.get_variable('x') is None
    brain.set_variable('x', 5)
    assert brain.get_variable('x') == 5.0
    brain.set_variable('x', -1)
    assert brain.get_variable('x') == -1.0


def test_snapshot(brain, push):
    push(2, 'x', '×', 'π', '−', 0.1, 'sin')
    brain.set_variable('x', 3)
    assert brain.snapshot() == {
        'stack': ['2.0', 'x', '×', 'π', '−', '0.1', 'sin'],
        'vars': {'x': 3.0},
    }


def test_snapshot_is_a_copy(brain, push):
    push(1)
    snapshot = brain.snapshot()
    snapshot['stack'].append('+')
    snapshot['vars']['x'] = 1.0
    assert brain.snapshot() == {'stack': ['1.0'], 'vars': {}}


@mark.parametrize('keys', [
    (2, 3, '+', 4, '×'),
    (1, 2, 3),
    (6, 0, '/', 1),
    ('x', 2, '^', 'y', '/'),
    (0.1, 1e-300, '×', 'e', '±', 'tan'),
    (1e300, 1e300, '×', 'sin'),
    ('√', 7, '−'),
])
def test_round_trip(brain, keys):
    press(brain, *keys)
    brain.set_variable('x', 1.5)
    restored = Brain()
    restored.restore(json.loads(json.dumps(brain.snapshot())))
    assert restored.snapshot() == brain.snapshot()
    assert str(restored.evaluate_result()) == str(brain.evaluate_result())
    assert restored.full_description == brain.full_description


def test_round_trip_exact(brain):
    brain.push_literal(0.1 + 0.2)
    restored = Brain()
    restored.restore(brain.snapshot())
    assert restored.evaluate() == 0.1 + 0.2


def test_restore_resolution_order(brain):
    brain.restore({'stack': ['π', '2.5', 'x', 'sin', '-3', 'nan', '1e3'],
                   'vars': {}})
    assert brain.stack[:5] == [
        Constant('π', math.pi),
        Literal(2.5),
        Variable('x'),
        brain.vocabulary['sin'],
        Literal(-3.0),
    ]
    assert math.isnan(brain.stack[5].value)
    assert brain.stack[6] == Literal(1000.0)
    assert isinstance(brain.stack[3], UnaryOp)


def test_restore_variable_named_like_operator(brain):
    brain.push_variable('e')
    brain.set_variable('e', 1)
    assert brain.evaluate() == 1
    restored = Brain()
    restored.restore(brain.snapshot())
    assert restored.stack == [Constant('e', math.e)]
    assert restored.evaluate() == math.e


def test_restore_replaces(brain, push):
    push(1, 2, '+')
    brain.set_variable('y', 2)
    brain.restore({'stack': ['x'], 'vars': {'x': 4}})
    assert brain.stack == [Variable('x')]
    assert brain.variables == {'x': 4.0}
    assert brain.evaluate() == 4


def test_restore_missing_keys(brain, push):
    push(1)
    brain.set_variable('x', 1)
    brain.restore({})
    assert brain.snapshot() == {'stack': [], 'vars': {}}


def test_restore_malformed(brain):
    brain.restore({'stack': [2, None, '.'], 'vars': {'x': 'one', 'y': '2'}})
    assert brain.stack == [Literal(2.0), Variable('None'), Variable('.')]
    assert brain.variables == {'y': 2.0}


def test_program_property(brain, push):
    push(3, '√')
    program = brain.program
    other = Brain()
    other.program = program
    assert other.description == '√3'


def test_clone_independent(brain, push):
    push('x', 1, '+')
    brain.set_variable('x', 1)
    clone = brain.clone()
    clone.set_variable('x', 10)
    clone.push_operator('±')
    assert brain.evaluate() == 2
    assert brain.description == 'x+1'
    assert clone.evaluate() == -11
    brain.set_variable('x', 100)
    brain.undo()
    assert clone.get_variable('x') == 10
    assert clone.description == '±(x+1)'


def test_observer_on_every_fold():
    seen = []
    brain = Brain(observer=lambda token, folded: seen.append(folded))
    brain.push_literal(2)
    assert seen == [Value(2)]
    assert brain.description == '2'
    assert seen[1] == ('2', MAX_PRECEDENCE)
    assert brain.clone().observer is brain.observer


@mark.parametrize('snapshot', [None, 'stack', 3, ['1.0', '+']])
def test_restore_not_a_snapshot(brain, push, snapshot):
    push(1, 'x', '+')
    brain.set_variable('x', 2)
    before = brain.snapshot()
    brain.restore(snapshot)
    assert brain.snapshot() == before
    assert brain.evaluate() == 3


def test_restore_bad_parts(brain):
    brain.restore({'stack': '12', 'vars': [1]})
    assert brain.snapshot() == {'stack': [], 'vars': {}}
    brain.restore({'stack': ['2.0', 'x', '×'], 'vars': None})
    assert brain.stack == [Literal(2.0), Variable('x'), brain.vocabulary['×']]
    assert brain.variables == {}


def test_deep_round_trip(brain):
    brain.restore({'stack': ['1'] + ['2', '×', 'sin'] * 1500})
    assert brain.evaluate() is not None
    restored = brain.clone()
    assert restored.evaluate() == brain.evaluate()
    assert restored.full_description == brain.full_description
