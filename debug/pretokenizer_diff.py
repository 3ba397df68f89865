import sys
import regex
from pretoken_scanner.pattern_scanner import find_matches
from pretoken_scanner.pretoken_utilities import REFERENCE_PRETOKEN_REGEX

# prints the first position where the scanner and the regex disagree, for every line of the file
def diff_file(file_path: str) -> int:
    compiled_regex = regex.compile(REFERENCE_PRETOKEN_REGEX)
    mismatches = 0
    with open(file_path, "r", encoding="utf-8", errors="surrogatepass", newline="") as file:
        for line_number, line in enumerate(file, start=1):
            expected = compiled_regex.findall(line)
            actual = find_matches(line)
            if expected == actual:
                continue
            mismatches += 1
            index = next((i for i, (a, b) in enumerate(zip(expected, actual)) if a != b), min(len(expected), len(actual)))
            print(f"line {line_number}, token {index}: regex {expected[index:index + 3]!r} scanner {actual[index:index + 3]!r}")
    return mismatches

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} <input-file>", file=sys.stderr)
        sys.exit(2)
    mismatches = diff_file(sys.argv[1])
    print(f"{mismatches} mismatching lines")
    sys.exit(1 if mismatches else 0)
