import sys
import os

from . import driver
from .parser import main as parser_main
from .runtime import evaluator as runtime_evaluator

OPTIONS = {"debug", "canonical"}

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    options = set(args)
    config = driver.ReplConfig.from_options(options)

    if config.debug:
        runtime_evaluator.DEBUG_EVAL = True
        parser_main.DEBUG_READ = True

    input_path = next((a for a in args if a not in OPTIONS), None)
    if input_path is None:
        driver.repl(config)
        return 0

    input_path = os.path.abspath(input_path)
    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        print(f"Failed to read file: {input_path}")
        print(f"Error: {e}")
        return 1

    driver.run_lines(lines, config)
    return 0

if __name__ == "__main__":
    sys.exit(main())
