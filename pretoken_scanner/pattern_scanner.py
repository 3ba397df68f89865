from typing import Callable, Iterator
from pretoken_scanner.unicode_classes import is_letter, is_number, is_newline, is_whitespace

contraction_short_suffixes = frozenset("sdmt")
contraction_long_suffixes = frozenset(["ll", "ve", "re"])

# lowercases ascii characters only, everything else is kept as is
def _ascii_lower(chars: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in chars)

def _is_inline_whitespace(char: str) -> bool:
    return is_whitespace(char) and not is_newline(char)

def _is_other(char: str) -> bool:
    return not is_whitespace(char) and not is_letter(char) and not is_number(char)

class PatternScanner:
    """
    Splits text into pretokens with a single forward scan.

    The output is the same as a global leftmost-first scan with the pattern

        '(?i:[sdmt]|ll|ve|re)|[^\\r\\n\\p{L}\\p{N}]?\\p{L}+|\\p{N}{1,3}| ?[^\\s\\p{L}\\p{N}]+[\\r\\n]*|[^\\S\\r\\n]*[\\r\\n]+|[^\\S\\r\\n]+(?!\\S)|\\s+

    but every alternative is a rule that either consumes a span from the cursor or leaves
    the cursor untouched, so no backtracking engine is needed. The rules are tried in the
    order of the alternatives, when all of them decline a single character is consumed.

    The scanner can be bounded to the window [start, end) of the text, the end of the window
    is treated as the end of the text. Spans are (start, end) indices into the text.
    """

    def __init__(self, text: str, start: int = 0, end: int | None = None):
        self.text = text
        self.end = len(text) if end is None else end
        if not 0 <= start <= self.end <= len(text):
            raise ValueError(f"invalid window [{start}, {self.end}) for text of length {len(text)}")
        self.position = start

    def __iter__(self) -> "PatternScanner":
        return self

    def __next__(self) -> tuple[int, int]:
        span = self.next_span()
        if span is None:
            raise StopIteration
        return span

    def next_span(self) -> tuple[int, int] | None:
        start = self.position
        if start >= self.end:
            return None
        end = (self._match_contraction(start)
               or self._match_letters(start)
               or self._match_numbers(start)
               or self._match_other_with_newlines(start)
               or self._match_whitespace_before_newlines(start)
               or self._match_whitespace_not_before_text(start)
               or self._match_any_whitespace(start)
               or start + 1)
        self.position = end
        return start, end

    def tokens(self) -> Iterator[str]:
        for start, end in self:
            yield self.text[start:end]

    # advances from pos while the predicate holds, returns the first position where it doesn't
    def _scan(self, pos: int, predicate: Callable[[str], bool]) -> int:
        text = self.text
        while pos < self.end and predicate(text[pos]):
            pos += 1
        return pos

    # 's 'd 'm 't 'll 've 're, case insensitive
    def _match_contraction(self, start: int) -> int | None:
        if self.text[start] != "'":
            return None
        suffix = self.text[start + 1:min(start + 3, self.end)]
        if len(suffix) == 2 and _ascii_lower(suffix) in contraction_long_suffixes:
            return start + 3
        if suffix and _ascii_lower(suffix[0]) in contraction_short_suffixes:
            return start + 2
        return None

    # optional character that is not a letter, number or newline, followed by letters
    def _match_letters(self, start: int) -> int | None:
        c = self.text[start]
        pos = start
        if not is_letter(c) and not is_number(c) and not is_newline(c):
            pos += 1
        end = self._scan(pos, is_letter)
        return end if end > pos else None

    # up to three numbers, the next one starts a new token
    def _match_numbers(self, start: int) -> int | None:
        text = self.text
        limit = min(start + 3, self.end)
        end = start
        while end < limit and is_number(text[end]):
            end += 1
        return end if end > start else None

    # optional space, symbols and punctuation, trailing newlines
    def _match_other_with_newlines(self, start: int) -> int | None:
        pos = start + 1 if self.text[start] == " " else start
        end = self._scan(pos, _is_other)
        if end == pos:
            return None
        return self._scan(end, is_newline)

    # whitespace that ends with newlines
    def _match_whitespace_before_newlines(self, start: int) -> int | None:
        pos = self._scan(start, _is_inline_whitespace)
        end = self._scan(pos, is_newline)
        return end if end > pos else None

    # the longest run of whitespace that is followed by whitespace or the end of text
    def _match_whitespace_not_before_text(self, start: int) -> int | None:
        run_end = self._scan(start, _is_inline_whitespace)
        for end in range(run_end, start, -1):
            if end == self.end or is_whitespace(self.text[end]):
                return end
        return None

    def _match_any_whitespace(self, start: int) -> int | None:
        end = self._scan(start, is_whitespace)
        return end if end > start else None

def find_spans(text: str) -> list[tuple[int, int]]:
    return list(PatternScanner(text))

def find_matches(text: str) -> list[str]:
    return list(PatternScanner(text).tokens())
