import sys
import time
import numpy as np
from pretoken_scanner.pretoken_counter import PretokenCounter
from pretoken_scanner.pretokenizer import Pretokenizer
from pretoken_scanner.pretoken_utilities import span_array, to_byte_spans

def count_file(input_path: str, special_tokens: list[str]):
    start_time = time.time()
    counter = PretokenCounter()
    pretokens = counter.count(input_path, special_tokens)
    span_time = time.time() - start_time
    print(f"{input_path}: {span_time:.2f} seconds")
    for pretoken, count in pretokens.most_common(20):
        print(f"{count:>10,} {pretoken!r}")

def save_byte_spans(input_path: str, output_path: str, special_tokens: list[str]):
    with open(input_path, "r", encoding="utf-8") as f:
        text = f.read()
    spans = list(Pretokenizer(special_tokens).next_span(text))
    arr = span_array(to_byte_spans(text, spans))
    np.save(output_path, arr)
    print(f"Saved {len(arr):,} spans to {output_path} ({arr.nbytes/1e6:.2f} MB)")

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} <input-file> [<output-spans.npy>]", file=sys.stderr)
        sys.exit(2)
    count_file(sys.argv[1], ["<|endoftext|>"])
    if len(sys.argv) > 2:
        save_byte_spans(sys.argv[1], sys.argv[2], ["<|endoftext|>"])
