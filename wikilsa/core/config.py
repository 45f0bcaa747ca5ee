import os
from dotenv import load_dotenv

load_dotenv()

# vocabulary
NUM_TERMS = int(os.getenv("NUM_TERMS", "50000"))
if not NUM_TERMS > 0:
    raise ValueError("NUM_TERMS must be a positive integer.")

# inputs / outputs
DOC_FREQS_PATH = os.getenv("DOC_FREQS_PATH", "docfreqs.tsv")
STOP_WORDS_PATH = os.getenv("STOP_WORDS_PATH", "stopwords.txt")

# dump reading
PAGE_START_TAG = os.getenv("PAGE_START_TAG", "<page>")
PAGE_END_TAG = os.getenv("PAGE_END_TAG", "</page>")
DUMP_BLOCKSIZE = int(os.getenv("DUMP_BLOCKSIZE", str(64 * 1024 * 1024)))
if not DUMP_BLOCKSIZE > 0:
    raise ValueError("DUMP_BLOCKSIZE must be a positive integer.")

# utils
WORD_PROCESS_METHOD = os.getenv("WORD_PROCESS_METHOD", "lemmatize")
if WORD_PROCESS_METHOD not in ("lemmatize", "stem"):
    raise ValueError("WORD_PROCESS_METHOD must be 'lemmatize' or 'stem'.")

# dask
DASK_SCHEDULER = os.getenv("DASK_SCHEDULER", "threads")
REDUCE_SPLIT_EVERY = int(os.getenv("REDUCE_SPLIT_EVERY", "15"))
if not REDUCE_SPLIT_EVERY > 1:
    raise ValueError("REDUCE_SPLIT_EVERY must be greater than 1.")

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
