"""Benchmark lexing throughput.

Compares the direct generator, lex(), and the threaded TokenStream
on the same inputs.

Run with:
    pytest benchmarks/benchmark_lex.py -v --benchmark-only
"""

import pytest

from marklex import TokenStream, lex, tokenize


@pytest.mark.benchmark(group="lex")
def test_benchmark_lex_large(benchmark, large_document):
    """Benchmark lex() over a large document."""
    benchmark(lex, large_document)


@pytest.mark.benchmark(group="lex")
def test_benchmark_tokenize_large(benchmark, large_document):
    """Benchmark draining tokenize() without building a list."""

    def drain():
        for _ in tokenize(large_document):
            pass

    benchmark(drain)


@pytest.mark.benchmark(group="lex")
def test_benchmark_real_world(benchmark, real_world_docs):
    def lex_all():
        for doc in real_world_docs:
            lex(doc)

    benchmark(lex_all)


@pytest.mark.benchmark(group="stream")
@pytest.mark.parametrize("maxsize", [1, 64])
def test_benchmark_token_stream(benchmark, large_document, maxsize):
    """Benchmark the threaded hand-off; maxsize=1 is a rendezvous."""

    def stream_all():
        with TokenStream(large_document, maxsize=maxsize) as stream:
            for _ in stream:
                pass

    benchmark(stream_all)
