from typing import Iterator
from pretoken_scanner.pattern_scanner import PatternScanner

normal_token_const = 0
special_token_const = 1

class Pretokenizer:
    def __init__(self, special_tokens: list[str] | None = None):
        self.special_tokens = special_tokens or []
        if any(not special_token for special_token in self.special_tokens):
            raise ValueError("special tokens must be non-empty strings")
        self._sorted_special_tokens = sorted(self.special_tokens, key=len, reverse=True)

    # splits text into (start, end, kind) chunks of normal text and special tokens
    def _split(self, text: str) -> list[tuple[int, int, int]]:
        spans = []
        # next occurrence of every special token, -1 once it no longer occurs
        next_positions = {special_token: text.find(special_token) for special_token in self._sorted_special_tokens}
        i = 0
        while i < len(text):
            span_start = i
            span_end = len(text)
            next_special_token = None
            for special_token in self._sorted_special_tokens:
                current = next_positions[special_token]
                if current != -1 and current < i:
                    current = text.find(special_token, i)
                    next_positions[special_token] = current
                if current != -1 and current < span_end:
                    span_end = current
                    next_special_token = special_token
            if span_end > span_start:
                spans.append((span_start, span_end, normal_token_const))
            if next_special_token:
                spans.append((span_end, span_end + len(next_special_token), special_token_const))
                span_end = span_end + len(next_special_token)
            i = span_end
        return spans

    def next_span(self, text: str) -> Iterator[tuple[int, int]]:
        for start, end, kind in self._split(text):
            if kind == special_token_const:
                yield start, end
            else:
                yield from PatternScanner(text, start, end)

    def next_token(self, text: str) -> Iterator[str]:
        for start, end in self.next_span(text):
            yield text[start:end]
