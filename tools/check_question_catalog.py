#!/usr/bin/env python
import os
import sys

# Allow running as `python tools/check_question_catalog.py` from a checkout
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from catalog import CatalogError, find_problems, get_all  # noqa: E402


def main():
    try:
        records = get_all()
    except CatalogError as e:
        print(f"Error: {e}")
        sys.exit(1)

    problems = find_problems(records)
    if problems:
        for p in problems:
            print(f"Error: {p}")
        print(f"Question catalog has {len(problems)} problem(s).")
        sys.exit(1)
    print(f"Question catalog OK: {len(records)} records")


if __name__ == "__main__":
    main()
