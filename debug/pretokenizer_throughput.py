import sys
import time
import regex
from pretoken_scanner.pattern_scanner import find_matches
from pretoken_scanner.pretoken_utilities import REFERENCE_PRETOKEN_REGEX

def pretokenizer_throughput(split, splitter_name: str, text: str) -> float:
    byte_len = len(text.encode("utf-8"))
    start = time.perf_counter()
    tokens = split(text)
    end = time.perf_counter()
    elapsed = end - start
    throughput = byte_len / elapsed if elapsed > 0 else float("inf")
    print(f"Pretokenizer throughput for {splitter_name}: {throughput:,.0f} bytes/sec")
    print(f"Elapsed time: {elapsed:.4f} s, {len(tokens):,} tokens")
    return throughput

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} <input-file>", file=sys.stderr)
        sys.exit(2)
    with open(sys.argv[1], "r", encoding="utf-8") as file:
        text = file.read()
    print(f"File size: {len(text.encode('utf-8')):,} bytes")
    compiled_regex = regex.compile(REFERENCE_PRETOKEN_REGEX)
    pretokenizer_throughput(find_matches, "pattern scanner", text)
    pretokenizer_throughput(compiled_regex.findall, "regex", text)
