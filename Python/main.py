import sys
import os

# Ensure we can import reduct package
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from reduct.__main__ import main

def print_usage():
    print("""Usage:
  python main.py [input-file] [options...]\n
Without an input file, statements are read from an interactive prompt.

Options:
  canonical - Print results in canonical {k = v} form
  debug     - Trace reading and every reduction step

Examples:
  python main.py
  python main.py tests/scripts/lookup.reduct
  python main.py tests/scripts/lookup.reduct debug
""")

if __name__ == "__main__":
    if any(a in ("-h", "--help") for a in sys.argv[1:]):
        print_usage()
        sys.exit(0)
    sys.exit(main())
