# entropy_engine/paths.py

import os

# --- Base data paths ---
DATA_DIR = os.getenv("ENTROPY_DATA_DIR", "data")

# --- Entropy term store (field -> term -> postings) ---
LEXICON_PATH = os.path.join(DATA_DIR, "entropy.lexicon")

# --- Deleted-doc bookkeeping for the snapshot ---
LIVE_DOCS_PATH = os.path.join(DATA_DIR, "live_docs.pkl")

# --- Field that holds one term per entropy record ---
ENTROPY_DATA_FIELD = "_yz_ed"

# --- Default page size ---
DEFAULT_N = 1000

# --- Request parameter names ---
CONTINUE_PARAM = "continue"
N_PARAM = "n"
PARTITION_PARAM = "partition"

# Toggle via env var: set ENTROPY_DEBUG=1 to trace every scanned term.
DEBUG = os.getenv("ENTROPY_DEBUG", "0") == "1"
