import pytest

from polaris import errors
from polaris.evaluation.evaluator import Evaluator
from polaris.reader.parser import read
from polaris.types.cell import Double, Integer, ListCell, Procedure, String, Symbol, Tag, nil
from polaris.types.environment import Environment
from polaris.types.lambda_fn import Lambda


# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def bare_env():
    e = Environment()
    e.define("x", Integer(42))
    e.define("#f", Symbol("#f"))
    e.define("#t", Symbol("#t"))
    e.define("+", Procedure(lambda _, args: Integer(sum(int(a.text) for a in args)), "+"))
    return e


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(evaluator, bare_env):
    for cell in (Integer(1), Double(3.25), String("hello")):
        assert evaluator.evaluate(cell, bare_env) is cell


def test_symbol_lookup(evaluator, bare_env):
    assert evaluator.evaluate(Symbol("x"), bare_env) == Integer(42)
    with pytest.raises(errors.UnboundSymbol):
        evaluator.evaluate(Symbol("z"), bare_env)


def test_empty_list_is_nil(evaluator, bare_env):
    assert evaluator.evaluate(ListCell(), bare_env) is nil


def test_quote_returns_operand_unevaluated(evaluator, bare_env):
    assert evaluator.evaluate(read("(quote (undefined 1 2))"), bare_env) == read("(undefined 1 2)")


def test_if_only_false_symbol_is_false(evaluator, bare_env):
    assert evaluator.evaluate(read("(if #t 1 2)"), bare_env) == Integer(1)
    assert evaluator.evaluate(read("(if #f 1 2)"), bare_env) == Integer(2)
    # nil, 0 and empty lists are all true
    assert evaluator.evaluate(read("(if 0 1 2)"), bare_env) == Integer(1)
    assert evaluator.evaluate(read("(if () 1 2)"), bare_env) == Integer(1)
    # a string reading "#f" renders the same as the false symbol
    assert evaluator.evaluate(read('(if "#f" 1 2)'), bare_env) == Integer(2)


def test_if_without_else_yields_nil(evaluator, bare_env):
    assert evaluator.evaluate(read("(if #f 1)"), bare_env) is nil


def test_define_returns_value_and_binds_innermost(evaluator, bare_env):
    inner = Environment(bare_env)
    assert evaluator.evaluate(read("(define x 7)"), inner) == Integer(7)
    assert inner.vars["x"] == Integer(7)
    assert bare_env.vars["x"] == Integer(42)


def test_set_mutates_owning_frame(evaluator, bare_env):
    inner = Environment(bare_env)
    assert evaluator.evaluate(read("(set! x 5)"), inner) == Integer(5)
    assert "x" not in inner.vars
    assert bare_env.vars["x"] == Integer(5)


def test_set_unbound_fails(evaluator, bare_env):
    with pytest.raises(errors.UnboundSymbol):
        evaluator.evaluate(read("(set! nope 1)"), bare_env)


def test_lambda_captures_child_of_defining_env(evaluator, bare_env):
    lam = evaluator.evaluate(read("(lambda (a b) (+ a b))"), bare_env)
    assert isinstance(lam, Lambda)
    assert lam.tag is Tag.LAMBDA
    assert lam.env.outer is bare_env
    marker, params, body = lam.items
    assert marker == Symbol("lambda")
    assert params == read("(a b)")
    assert body == read("(+ a b)")
    assert str(lam) == "<Lambda>"


def test_lambda_application(evaluator, bare_env):
    assert evaluator.evaluate(read("((lambda (a b) (+ a b x)) 2 3)"), bare_env) == Integer(47)


def test_lambda_surplus_arguments_are_dropped(evaluator, bare_env):
    assert evaluator.evaluate(read("((lambda (a) a) 1 2 3)"), bare_env) == Integer(1)


def test_lambda_missing_argument_stays_unbound(evaluator, bare_env):
    with pytest.raises(errors.UnboundSymbol):
        evaluator.evaluate(read("((lambda (a b) b) 1)"), bare_env)


def test_begin_sequencing(evaluator, bare_env):
    expr = read("(begin (define a 10) (define b 20) (+ a b))")
    assert evaluator.evaluate(expr, bare_env) == Integer(30)
    assert evaluator.evaluate(read("(begin)"), bare_env) is nil


def test_arguments_evaluate_left_to_right(evaluator, bare_env):
    seen = []

    def trace(_, args):
        seen.append(args[0].text)
        return args[0]

    bare_env.define("trace", Procedure(trace))
    evaluator.evaluate(read("(+ (trace 1) (trace 2) (trace 3))"), bare_env)
    assert seen == ["1", "2", "3"]


def test_not_callable(evaluator, bare_env):
    with pytest.raises(errors.NotCallable):
        evaluator.evaluate(read("(1 2 3)"), bare_env)
    with pytest.raises(errors.NotCallable):
        evaluator.evaluate(read('("f" 2)'), bare_env)


@pytest.mark.parametrize(
    "source",
    ["(quote)", "(if #t)", "(define x)", "(define 5 1)", "(set! x)", "(lambda (a))", "(lambda a a)"],
)
def test_malformed_special_forms(evaluator, bare_env, source):
    with pytest.raises(errors.MalformedForm):
        evaluator.evaluate(read(source), bare_env)


def test_special_forms_are_per_evaluator(bare_env):
    custom = Evaluator()
    custom.special_forms["first"] = lambda tail, env, evaluate_fn: tail[0]
    assert custom.evaluate(read("(first (a b))"), bare_env) == read("(a b)")
    with pytest.raises(errors.UnboundSymbol):
        Evaluator().evaluate(read("(first (a b))"), bare_env)


def test_runaway_recursion_is_reported(evaluator, env):
    evaluator.evaluate(read("(define loop (lambda (n) (+ 1 (loop n))))"), env)
    with pytest.raises(errors.RecursionDepthExceeded):
        evaluator.evaluate(read("(loop 1)"), env)


# -----------------------------------------------------
# Closures and scoping
# -----------------------------------------------------

def test_define_then_lookup_preserves_tag_and_text(evaluator, env):
    for literal in ["12", "-3", "2.5", '"text"', "(quote sym)", "(quote (1 2))"]:
        expected = evaluator.evaluate(read(literal), env)
        evaluator.evaluate(read(f"(define v {literal})"), env)
        value = evaluator.evaluate(Symbol("v"), env)
        assert value.tag is expected.tag
        assert value.text == expected.text


def test_closure_sees_later_definitions(run):
    run("(define is-even (lambda (n) (if (<= n 0) #t (is-odd (- n 1)))))")
    run("(define is-odd (lambda (n) (if (<= n 0) #f (is-even (- n 1)))))")
    assert run("(is-even 10)") == "#t"
    assert run("(is-odd 7)") == "#t"


def test_closure_uses_captured_not_caller_env(run):
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    run("(define add5 (make-adder 5))")
    run("(define n 100)")
    assert run("(add5 1)") == "6"
    assert run("((lambda (n) (add5 1)) 1000)") == "6"


def test_counter_with_set(run):
    run("(define make-counter (lambda () (begin (define count 0) (lambda () (set! count (+ count 1))))))")
    run("(define c (make-counter))")
    run("(c)")
    run("(c)")
    assert run("(c)") == "3"
    run("(define d (make-counter))")
    assert run("(d)") == "1"


def test_define_inside_lambda_does_not_leak(run, env):
    run("(define f (lambda (x) (begin (define local (* x 2)) local)))")
    assert run("(f 4)") == "8"
    assert "local" not in env


# -----------------------------------------------------
# Reference scenarios
# -----------------------------------------------------

SCENARIOS = [
    ("(quote (testing 1 (2.0) -3.14e159))", "(testing 1 (2.0) -3.14e159)"),
    ("(+ 2 2)", "4"),
    ("(+ (* 2 100) (* 1 10))", "210"),
    ("(if (> 6 5) (+ 1 1) (+ 2 2))", "2"),
    ("(if (< 6 5) (+ 1 1) (+ 2 2))", "4"),
    ("(define x 3)", "3"),
    ("x", "3"),
    ("(+ x x)", "6"),
    ("(begin (define x 1) (set! x (+ x 1)) (+ x 1))", "3"),
    ("((lambda (x) (+ x x)) 5)", "10"),
    ("(define twice (lambda (x) (* 2 x)))", "<Lambda>"),
    ("(twice 5)", "10"),
    ("(define compose (lambda (f g) (lambda (x) (f (g x)))))", "<Lambda>"),
    ("((compose list twice) 5)", "(10)"),
    ("(define repeat (lambda (f) (compose f f)))", "<Lambda>"),
    ("((repeat twice) 5)", "20"),
    ("((repeat (repeat twice)) 5)", "80"),
    ("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))", "<Lambda>"),
    ("(fact 3)", "6"),
    ("(fact 12)", "479001600"),
    ("(define abs (lambda (n) ((if (> n 0) + -) 0 n)))", "<Lambda>"),
    ("(list (abs -3) (abs 0) (abs 3))", "(3 0 3)"),
    ("(define combine (lambda (f)"
     "(lambda (x y)"
     "(if (null? x) (quote ())"
     "(f (list (car x) (car y))"
     "((combine f) (cdr x) (cdr y)))))))", "<Lambda>"),
    ("(define zip (combine cons))", "<Lambda>"),
    ("(zip (list 1 2 3 4) (list 5 6 7 8))", "((1 5) (2 6) (3 7) (4 8))"),
    ("(define riff-shuffle (lambda (deck) (begin"
     "(define take (lambda (n seq) (if (<= n 0) (quote ()) (cons (car seq) (take (- n 1) (cdr seq))))))"
     "(define drop (lambda (n seq) (if (<= n 0) seq (drop (- n 1) (cdr seq)))))"
     "(define mid (lambda (seq) (/ (length seq) 2)))"
     "((combine append) (take (mid deck) deck) (drop (mid deck) deck)))))", "<Lambda>"),
    ("(riff-shuffle (list 1 2 3 4 5 6 7 8))", "(1 5 2 6 3 7 4 8)"),
    ("((repeat riff-shuffle) (list 1 2 3 4 5 6 7 8))", "(1 3 5 7 2 4 6 8)"),
    ("(riff-shuffle (riff-shuffle (riff-shuffle (list 1 2 3 4 5 6 7 8))))", "(1 2 3 4 5 6 7 8)"),
]


def test_reference_session(run):
    # One shared environment: later entries depend on earlier definitions.
    for source, expected in SCENARIOS:
        assert run(source) == expected, source
