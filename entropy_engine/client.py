# entropy_engine/client.py
import requests

from entropy_engine.paths import CONTINUE_PARAM, DEFAULT_N, N_PARAM, PARTITION_PARAM


def fetch_page(base_url, partition, n=None, continuation=None, timeout=10):
    """
    Fetch one entropy_data page from a running server and return the decoded JSON body.
    Raises requests.HTTPError on a non-2xx reply.
    """
    url = base_url.rstrip("/") + "/entropy_data"
    params = {PARTITION_PARAM: partition}
    if n is not None:
        params[N_PARAM] = n
    if continuation is not None:
        params[CONTINUE_PARAM] = continuation

    r = requests.get(url, params=params, timeout=timeout)
    r.raise_for_status()
    return r.json()


def iter_remote_records(base_url, partition, n=DEFAULT_N, timeout=10):
    """
    Follow continuation tokens until the server reports more=false,
    yielding every doc dict of the partition in order.
    """
    cont = None
    while True:
        body = fetch_page(base_url, partition, n=n, continuation=cont, timeout=timeout)
        yield from body["response"]["docs"]
        if not body.get("more"):
            return
        cont = body["continuation"]
