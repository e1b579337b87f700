"""Reduction driver and prompt loop.

The core (reader, evaluator, printer) never touches I/O; everything that
reads lines or writes results lives here.
"""
import sys
from typing import Callable, Iterable, Optional, Set, TextIO

from .parser import read
from .printing import render_canonical, render_pretty, describe_error
from .runtime.types import Atom
from .runtime.forms import is_error, is_statement
from .runtime import evaluator

class InfiniteLoop(Exception):
    def __init__(self, atom: Atom, steps: int):
        super().__init__(f"Infinite loop detected after {steps} steps")
        self.atom = atom
        self.steps = steps

def reduce_to_fixed_point(atom: Atom, on_step: Optional[Callable[[Atom], None]] = None) -> Atom:
    """Step ``atom`` until it is no longer a statement or is an error.

    Raises InfiniteLoop as soon as a state repeats.
    """
    seen: Set[Atom] = {atom}
    steps = 0
    while is_statement(atom) and not is_error(atom):
        atom = evaluator.eval_atom(atom)
        steps += 1
        if on_step is not None: on_step(atom)
        if atom in seen:
            raise InfiniteLoop(atom, steps)
        seen.add(atom)
    return atom

# ======================================
# Prompt loop
# ======================================

class ReplConfig:
    def __init__(self, prompt: str, pretty: bool, debug: bool):
        self.prompt = prompt
        self.pretty = pretty
        self.debug = debug

    @staticmethod
    def default() -> 'ReplConfig':
        return ReplConfig(prompt="> ", pretty=True, debug=False)

    @staticmethod
    def from_options(options: Iterable[str]) -> 'ReplConfig':
        opts = set(options)
        config = ReplConfig.default()
        config.pretty = "canonical" not in opts
        config.debug = "debug" in opts
        return config

    def render(self, atom: Atom) -> str:
        return render_pretty(atom) if self.pretty else render_canonical(atom)

def process_line(text: str, config: Optional[ReplConfig] = None) -> Optional[str]:
    config = config or ReplConfig.default()
    if not text.strip():
        return None
    value = read(text)
    if is_error(value):
        return describe_error(value)
    trace = (lambda a: print(f"  => {config.render(a)}")) if config.debug else None
    try:
        result = reduce_to_fixed_point(value, trace)
    except InfiniteLoop:
        return "Infinite loop detected"
    except RecursionError:
        return "Eval error: Expression nested too deeply"
    if is_error(result):
        return describe_error(result)
    return config.render(result)

def run_lines(lines: Iterable[str], config: Optional[ReplConfig] = None, out: Optional[TextIO] = None):
    config = config or ReplConfig.default()
    out = out or sys.stdout
    for line in lines:
        output = process_line(line, config)
        if output is not None:
            print(output, file=out)

def repl(config: Optional[ReplConfig] = None):
    config = config or ReplConfig.default()
    while True:
        try:
            line = input(config.prompt)
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print()
            continue
        output = process_line(line, config)
        if output is not None:
            print(output)
