# tests/test_handler.py
import pytest

from entropy_engine.continuation import decode_cont
from entropy_engine.errors import DecodeError, ParameterError
from entropy_engine.handler import EntropyDataHandler
from entropy_engine.paths import DEFAULT_N


def test_response_shape(example_reader):
    rsp = EntropyDataHandler(example_reader).handle({"partition": "p1", "n": "2"})
    assert rsp["more"] is True
    assert rsp["response"]["numFound"] == 2
    assert [d["riak_key"] for d in rsp["response"]["docs"]] == ["K1", "K2"]
    assert decode_cont(rsp["continuation"]) == b"1 p1 A B K2 h3"


def test_follow_continuation(example_reader):
    handler = EntropyDataHandler(example_reader)
    first = handler.handle({"partition": "p1", "n": "2"})
    second = handler.handle({"partition": "p1", "n": "2", "continue": first["continuation"]})
    assert [d["riak_key"] for d in second["response"]["docs"]] == ["K3"]
    assert second["more"] is False
    assert "continuation" not in second


def test_default_page_size(make_reader):
    terms = [f"1 p1 A B K{i:05d} h" for i in range(DEFAULT_N + 5)]
    handler = EntropyDataHandler(make_reader(terms))
    rsp = handler.handle({"partition": "p1"})
    assert rsp["response"]["numFound"] == DEFAULT_N
    assert rsp["more"] is True
    rest = handler.handle({"partition": "p1", "continue": rsp["continuation"]})
    assert rest["response"]["numFound"] == 5
    assert rest["more"] is False


def test_blank_continue_starts_over(example_reader):
    rsp = EntropyDataHandler(example_reader).handle({"partition": "p1", "continue": ""})
    assert [d["riak_key"] for d in rsp["response"]["docs"]] == ["K1", "K2", "K3"]


def test_missing_partition(example_reader):
    with pytest.raises(ParameterError):
        EntropyDataHandler(example_reader).handle({"n": "5"})


@pytest.mark.parametrize("n", ["abc", "0", "-3", "1.5"])
def test_bad_n(example_reader, n):
    with pytest.raises(ParameterError):
        EntropyDataHandler(example_reader).handle({"partition": "p1", "n": n})


def test_bad_continue(example_reader):
    with pytest.raises(DecodeError):
        EntropyDataHandler(example_reader).handle({"partition": "p1", "continue": "a"})


def test_metadata():
    assert EntropyDataHandler.description == "vector clock data iterator"
    assert EntropyDataHandler.version == "0.0.1"
