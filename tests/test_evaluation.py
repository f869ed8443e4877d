import pytest
from rsp.types import Environment, Symbol, Function, Nil
from rsp.evaluation import evaluate
from rsp.runtime_context import RuntimeContext
from rsp import errors

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    env = Environment()
    env.define(Symbol("+"), lambda _, args: sum(args))
    env.define(Symbol("-"), lambda _, args: args[0] - sum(args[1:]))
    env.define(Symbol("*"), lambda _, args: args[0] * args[1])
    env.define(Symbol("x"), 42.0)
    env.define(Symbol("y"), 100.0)
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate(Nil, env) is Nil

def test_empty_list_evaluates_to_itself(env):
    assert evaluate([], env) == []

def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42.0
    assert evaluate(Symbol("y"), env) == 100.0
    with pytest.raises(errors.RspUnboundSymbol) as info:
        evaluate(Symbol("z"), env)
    assert info.value.name == "z"

def test_quote(env):
    expr = [Symbol("quote"), [1.0, 2.0, 3.0]]
    assert evaluate(expr, env) == [1.0, 2.0, 3.0]

def test_simple_expression(env):
    expr = [Symbol("+"), 1.0, 2.0]
    assert evaluate(expr, env) == 3.0

def test_fn_simple(env):
    expr = [Symbol("fn"), [Symbol("a"), Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]
    f = evaluate(expr, env)
    assert isinstance(f, Function)
    assert evaluate([f, 2.0, 3.0], env) == 5.0

def test_fn_does_not_evaluate_body_at_creation(env):
    # Body references an unbound symbol; only calling it fails
    f = evaluate([Symbol("fn"), [], Symbol("nowhere")], env)
    with pytest.raises(errors.RspUnboundSymbol):
        evaluate([f], env)

def test_fn_empty_body_returns_nil(env):
    f = evaluate([Symbol("fn"), [Symbol("a")]], env)
    assert evaluate([f, 1.0], env) is Nil

def test_fn_body_forms_run_in_order(env):
    expr = [
        Symbol("fn"), [],
        [Symbol("let"), Symbol("t"), 1.0],
        [Symbol("+"), Symbol("t"), Symbol("x")],
    ]
    f = evaluate(expr, env)
    assert evaluate([f], env) == 43.0

def test_let_binds_and_returns_value(env):
    assert evaluate([Symbol("let"), Symbol("v"), [Symbol("*"), 6.0, 7.0]], env) == 42.0
    assert env.lookup(Symbol("v")) == 42.0

def test_let_names_anonymous_function(env):
    evaluate([Symbol("let"), Symbol("inc"), [Symbol("fn"), [Symbol("n")], [Symbol("+"), Symbol("n"), 1.0]]], env)
    assert env.lookup(Symbol("inc")).name == "inc"

def test_arguments_are_evaluated_left_to_right(env):
    seen = []

    def note(_, args):
        seen.append(args[0])
        return args[0]

    env.define(Symbol("note"), note)
    evaluate([Symbol("+"), [Symbol("note"), 1.0], [Symbol("note"), 2.0], [Symbol("note"), 3.0]], env)
    assert seen == [1.0, 2.0, 3.0]

def test_head_is_evaluated(env):
    expr = [[Symbol("fn"), [Symbol("a")], Symbol("a")], 9.0]
    assert evaluate(expr, env) == 9.0

def test_not_a_function(env):
    with pytest.raises(errors.RspNotAFunction) as info:
        evaluate([1.0, 2.0], env)
    assert info.value.value_repr == "1"
    with pytest.raises(errors.RspNotAFunction):
        evaluate([Symbol("x")], env)

def test_closure_keeps_defining_frame(env):
    make_adder = evaluate(
        [Symbol("fn"), [Symbol("a")], [Symbol("fn"), [Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]],
        env,
    )
    add5 = evaluate([make_adder, 5.0], env)
    add1 = evaluate([make_adder, 1.0], env)
    assert evaluate([add5, 10.0], env) == 15.0
    assert evaluate([add1, 10.0], env) == 11.0

def test_parameters_shadow_outer_bindings(env):
    f = evaluate([Symbol("fn"), [Symbol("x")], Symbol("x")], env)
    assert evaluate([f, 1.0], env) == 1.0
    assert env.lookup(Symbol("x")) == 42.0

def test_call_frame_bindings_do_not_leak(env):
    f = evaluate([Symbol("fn"), [], [Symbol("let"), Symbol("inner"), 1.0]], env)
    evaluate([f], env)
    assert Symbol("inner") not in env

def test_evaluate_without_context_uses_fresh_one(env):
    assert evaluate([Symbol("+"), 1.0, 1.0], env, None) == 2.0
    assert evaluate([Symbol("+"), 1.0, 1.0], env, RuntimeContext()) == 2.0
