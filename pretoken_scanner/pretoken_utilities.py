import mmap
import numpy as np

# the pattern PatternScanner reproduces, kept as data for comparisons with a regex engine
REFERENCE_PRETOKEN_REGEX = r"""'(?i:[sdmt]|ll|ve|re)|[^\r\n\p{L}\p{N}]?\p{L}+|\p{N}{1,3}| ?[^\s\p{L}\p{N}]+[\r\n]*|[^\S\r\n]*[\r\n]+|[^\S\r\n]+(?!\S)|\s+"""

# converts spans of string indices into spans of utf-8 byte offsets
def to_byte_spans(text: str, spans: list[tuple[int, int]]) -> list[tuple[int, int]]:
    byte_spans = []
    char_pos = 0
    byte_pos = 0
    for start, end in spans:
        if start < char_pos:
            # spans out of order, measure from the beginning again
            char_pos = 0
            byte_pos = 0
        byte_start = byte_pos + _utf8_len(text[char_pos:start])
        byte_end = byte_start + _utf8_len(text[start:end])
        byte_spans.append((byte_start, byte_end))
        char_pos = end
        byte_pos = byte_end
    return byte_spans

def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8", errors="surrogatepass"))

# packs spans into an array of shape (n, 2)
def span_array(spans: list[tuple[int, int]]) -> np.ndarray:
    return np.array(spans, dtype=np.int64).reshape(-1, 2)

# splits file into chunks based on special_token edge and a desired size
def split_into_chunks(mm: mmap.mmap, start: int, end: int, desired_size: int, special_tokens: list[bytes], search_size: int = 1024) -> list[tuple[int, int]]:
    chunks = []
    total_size = end - start
    chunk_size = max(min(desired_size, total_size), 1)
    chunk_start = start
    chunk_end = chunk_start + chunk_size
    while chunk_start < end:
        chunk_end = _adjust_chunk_end(mm, chunk_end, end, special_tokens, search_size)
        chunks.append((chunk_start, chunk_end))
        chunk_start = chunk_end
        chunk_end = min(chunk_start + chunk_size, end)
    return chunks

# adjusts the chunk to end on a special token
def _adjust_chunk_end(mm: mmap.mmap, chunk_end: int, end: int, special_tokens: list[bytes], search_size: int = 1024) -> int:
    if chunk_end >= end:
        return end
    longest = max((len(special_token) for special_token in special_tokens), default=1)
    while chunk_end < end:
        read_count = min(search_size, end - chunk_end)
        # overlap the windows so that a token on the window edge is still found
        read_ahead = mm[chunk_end:min(chunk_end + read_count + longest - 1, end)]
        found = [pos for pos in (read_ahead.find(special_token) for special_token in special_tokens) if pos != -1]
        if found:
            return chunk_end + min(found)
        chunk_end += read_count
    return end
