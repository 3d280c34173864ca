# entropy_engine/utils.py

import pickle

from entropy_engine.liveness import LiveDocs


def write_live_docs(live_docs, path):
    """
    Save live-doc bookkeeping to disk using pickle.
    Args:
        live_docs: LiveDocs
        path: str, file path
    """
    data = {"max_doc": live_docs.max_doc, "deleted": sorted(live_docs.deleted)}
    with open(path, 'wb') as f:
        pickle.dump(data, f)
    print(f"Live docs saved to {path} (max_doc={live_docs.max_doc}, deleted={len(live_docs.deleted)})")


def load_live_docs(path):
    """
    Load live-doc bookkeeping from disk.
    Args:
        path: str, file path
    Returns:
        live_docs: LiveDocs
    """
    with open(path, 'rb') as f:
        data = pickle.load(f)
    live_docs = LiveDocs(data["max_doc"], data["deleted"])
    print(f"Live docs loaded from {path} (max_doc={live_docs.max_doc}, deleted={len(live_docs.deleted)})")
    return live_docs
