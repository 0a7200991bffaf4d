import pytest

from samlisp import errors
from samlisp.builtin.env_builtin import default_environment
from samlisp.evaluation.evaluator import evaluate
from samlisp.types.function import Lambda
from samlisp.types.symbol import Symbol


# ------------------ def ------------------

def test_def_binds_and_returns_zero(run, env):
    assert run("(def x 42)") == 0
    assert env.lookup(Symbol("x")) == 42
    assert run("x") == 42


def test_def_evaluates_value(run):
    run("(def x (+ 1 2))")
    assert run("x") == 3


def test_def_rebinding_overwrites(run):
    run("(def x 1)")
    run("(def x 2.5)")
    assert run("x") == 2.5


@pytest.mark.parametrize("source", ["(def 1 2)", "(def (x) 2)", "(def true 2)"])
def test_def_requires_symbol(run, source):
    with pytest.raises(errors.MalformedSpecialForm) as info:
        run(source)
    assert info.value.form == "def"


@pytest.mark.parametrize("source,actual", [("(def)", 0), ("(def x)", 1), ("(def x 1 2)", 3)])
def test_def_arity(run, source, actual):
    with pytest.raises(errors.ArityMismatch) as info:
        run(source)
    assert info.value.form == "def"
    assert info.value.expected == 2
    assert info.value.actual == actual


def test_def_failing_value_leaves_no_binding(run, env):
    with pytest.raises(errors.UnknownSymbol):
        run("(def x (boom))")
    assert Symbol("x") not in env


def test_builtins_can_be_rebound_per_session(run):
    run("(def + -)")
    assert run("(+ 5 3)") == 2
    assert evaluate((Symbol("+"), 5, 3), default_environment()) == 8


# ------------------ fn ------------------

def test_fn_returns_closure(run, env):
    lam = run("(fn (a b) (+ a b))")
    assert isinstance(lam, Lambda)
    assert lam.params == (Symbol("a"), Symbol("b"))
    assert lam.body == (Symbol("+"), Symbol("a"), Symbol("b"))
    assert lam.env is env


def test_fn_body_is_not_evaluated_at_creation(run):
    assert isinstance(run("(fn () (boom))"), Lambda)


@pytest.mark.parametrize("source", ["(fn x x)", "(fn 1 1)", "(fn (x 1) x)", "(fn ((x)) x)"])
def test_fn_malformed_parameters(run, source):
    with pytest.raises(errors.MalformedSpecialForm) as info:
        run(source)
    assert info.value.form == "fn"


@pytest.mark.parametrize("source", ["(fn)", "(fn (x))", "(fn (x) x x)"])
def test_fn_arity(run, source):
    with pytest.raises(errors.ArityMismatch) as info:
        run(source)
    assert info.value.form == "fn"
    assert info.value.expected == 2


# ------------------ if ------------------

def test_if_expression(run):
    assert run("(if true 1 2)") == 1
    assert run("(if false 1 2)") == 2
    assert run("(if (< 1 2) (+ 1 1) (boom))") == 2


def test_if_never_evaluates_untaken_branch(run):
    # (/ 1 true) would fail with a type error if it were evaluated
    assert run("(if true 1 (/ 1 true))") == 1
    assert run("(if false (/ 1 true) 2)") == 2


def test_if_taken_branch_errors_propagate(run):
    with pytest.raises(errors.TypeMismatch):
        run("(if true (/ 1 true) 2)")


@pytest.mark.parametrize("cond,rendered", [("1", "1"), ("0", "0"), ("1.0", "1.0"), ("(fn () 1)", "<function>")])
def test_if_requires_boolean(run, cond, rendered):
    with pytest.raises(errors.TypeMismatch) as info:
        run(f"(if {cond} 1 2)")
    assert info.value.form == "if"
    assert info.value.got == rendered


@pytest.mark.parametrize("source,actual", [("(if true 1)", 2), ("(if true 1 2 3)", 4), ("(if)", 0)])
def test_if_arity(run, source, actual):
    with pytest.raises(errors.ArityMismatch) as info:
        run(source)
    assert info.value.expected == 3
    assert info.value.actual == actual


# ------------------ aliasing ------------------

def test_special_forms_keep_laziness_through_aliases(run):
    run("(def when if)")
    assert run("(when true 1 (boom))") == 1


def test_strict_builtins_through_aliases(run):
    run("(def plus +)")
    assert run("(plus 1 2)") == 3
