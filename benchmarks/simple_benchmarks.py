from timeit import timeit

from samlisp.interpreter import Interpreter
from samlisp.types.symbol import Symbol
from samlisp.types.environment import Environment

# Helpers to parse once and time evaluation only
from samlisp.reader.parser import read


def time_interpreter(setup: str, code: str, rounds: int) -> float:
    """Time the evaluator on a pre-parsed form after running `setup` once."""
    itp = Interpreter()
    itp.eval(setup)
    expr = read(code)
    # Warmup
    itp.eval_expr(expr)
    # Timed
    return timeit(lambda: itp.eval_expr(expr), number=rounds)


# Environment lookup through a long chain of call frames

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment.child_of(env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


CLOSURE_APPLY_CODE = "((fn (x y) (+ x y)) 1 2)"

FACTORIAL_SETUP = """
(def fact (fn (n)
  (if (< n 2)
      1
      (* n (fact (- n 1))))))
"""
FACTORIAL_CODE = "(fact 20)"

FIB_SETUP = """
(def fib (fn (n)
  (if (< n 2)
      n
      (+ (fib (- n 1)) (fib (- n 2))))))
"""
FIB_CODE = "(fib 15)"


def _print_result(name: str, seconds: float, rounds: int) -> None:
    print(f"Benchmark: {name}")
    print(f"  time: {seconds:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _print_result("environment lookup chain", bench_lookup_chain(), rounds=10000)
    _print_result("closure application", time_interpreter("", CLOSURE_APPLY_CODE, 20000), rounds=20000)
    _print_result("recursive factorial", time_interpreter(FACTORIAL_SETUP, FACTORIAL_CODE, 2000), rounds=2000)
    _print_result("recursive fibonacci", time_interpreter(FIB_SETUP, FIB_CODE, 20), rounds=20)
