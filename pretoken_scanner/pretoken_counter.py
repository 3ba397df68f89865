from collections import Counter
from multiprocessing import Pool, cpu_count
import os
import mmap
import logging
from pretoken_scanner.pretokenizer import Pretokenizer
from pretoken_scanner.pretoken_utilities import split_into_chunks

class PretokenCounter:
    chunk_min_size = 1024
    buffer_size = 256
    special_token_search_size = 1024

    def __init__(self):
        self.pretokens = Counter()
        self._setup_logging()

    # counts the pretokens of a utf-8 file, special tokens are not counted
    def count(self, input_path: str, special_tokens: list[str] | None = None) -> Counter[str]:
        special_tokens = special_tokens or []
        self._log_message("Started counting pretokens for %s with %d special tokens", input_path, len(special_tokens))
        process_count = cpu_count()
        encoded_special_tokens = [token.encode("utf-8") for token in special_tokens]
        with open(input_path, "rb") as file:
            file.seek(0, os.SEEK_END)
            file_size_bytes = file.tell()
            if file_size_bytes == 0:
                self._log_message("File %s is empty", input_path)
                self.pretokens = Counter()
                return self.pretokens
            desired_chunk_size = min(max(file_size_bytes // process_count, PretokenCounter.chunk_min_size), file_size_bytes)
            with mmap.mmap(file.fileno(), 0, access=mmap.ACCESS_READ) as mm:
                chunks = split_into_chunks(mm, 0, file_size_bytes, desired_chunk_size, encoded_special_tokens, PretokenCounter.special_token_search_size)
        self._log_message("Split %s into %d chunks", input_path, len(chunks))
        pretokens = PretokenCounter._count_parallel(input_path, chunks, special_tokens)
        for special_token in special_tokens:
            if special_token in pretokens:
                del pretokens[special_token]
        self._log_message("Finished counting pretokens for %s, collected %d distinct pretokens", input_path, len(pretokens))
        self.pretokens = pretokens
        return pretokens

    # counts the pretokens of every chunk in a separate process
    @staticmethod
    def _count_parallel(input_path: str, chunks: list[tuple[int, int]], special_tokens: list[str]) -> Counter[str]:
        args_list = [(start, end, special_tokens, input_path) for start, end in chunks]
        with Pool(len(chunks)) as pool:
            results = pool.map(PretokenCounter._count_worker, args_list)
        pretokens = Counter()
        for c in results:
            pretokens.update(c)
        return pretokens

    @staticmethod
    def _count_worker(args) -> Counter[str]:
        start, end, special_tokens, input_path = args
        counter = Counter()
        pretokenizer = Pretokenizer(special_tokens)
        encoded_special_tokens = [token.encode("utf-8") for token in special_tokens]
        with open(input_path, "rb") as f:
            with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
                read_parts = split_into_chunks(mm, start, end, PretokenCounter.buffer_size, encoded_special_tokens, PretokenCounter.special_token_search_size)
                for read_start, read_end in read_parts:
                    text = mm[read_start:read_end].decode("utf-8", errors="replace")
                    counter.update(pretokenizer.next_token(text))
        return counter

    def _setup_logging(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        if self.logger.hasHandlers():
            return
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO)

    def _log_message(self, msg: str, *args):
        self.logger.info(msg, *args)
