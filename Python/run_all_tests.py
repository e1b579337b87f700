import os
import subprocess
import sys
import glob
from typing import List

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SCRIPTS_DIR = os.path.join(ROOT, "tests", "scripts")
MAIN = os.path.join(ROOT, "Python", "main.py")

def collect_tests() -> List[str]:
    return sorted(glob.glob(os.path.join(SCRIPTS_DIR, "*.reduct")))

def expected_path(test_file: str) -> str:
    return os.path.splitext(test_file)[0] + ".expected"

def run_test(test_file: str) -> List[str]:
    result = subprocess.run(
        [sys.executable, MAIN, test_file],
        capture_output=True,
        text=True,
        encoding='utf-8'
    )
    if result.returncode != 0:
        raise RuntimeError(f"{os.path.basename(test_file)} exited with {result.returncode}:\n{result.stderr}")
    return result.stdout.splitlines()

def read_expected(test_file: str) -> List[str]:
    with open(expected_path(test_file), 'r', encoding='utf-8') as f:
        return f.read().splitlines()

def run_tests() -> int:
    test_files = collect_tests()

    print(f"Running {len(test_files)} tests...\n")

    failures = 0
    for test_file in test_files:
        test_name = os.path.basename(test_file)
        print(f"--- Running {test_name} ---")

        try:
            actual = run_test(test_file)
        except RuntimeError as e:
            print(f"Execution failed: {e}")
            failures += 1
            continue

        expected = read_expected(test_file)
        if actual == expected:
            print("ok")
        else:
            failures += 1
            for i, (want, got) in enumerate(zip(expected, actual)):
                if want != got:
                    print(f"  line {i + 1}: expected {want!r}, got {got!r}")
            if len(expected) != len(actual):
                print(f"  expected {len(expected)} lines, got {len(actual)}")
        print()

    print(f"{len(test_files) - failures}/{len(test_files)} passed")
    return 1 if failures else 0

if __name__ == "__main__":
    sys.exit(run_tests())
