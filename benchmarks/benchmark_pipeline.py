"""Benchmark the scan, parse and render stages.

Run with:
    pytest benchmarks/benchmark_pipeline.py -v --benchmark-only
"""

import pytest

from gohan import Markdown, parse, render, render_html, scan


@pytest.mark.benchmark(group="pipeline")
def test_benchmark_scan(benchmark, large_document):
    """Benchmark tokenization alone."""
    benchmark(scan, large_document)


@pytest.mark.benchmark(group="pipeline")
def test_benchmark_parse(benchmark, large_document):
    """Benchmark scan + parse of a large document."""
    benchmark(parse, large_document)


@pytest.mark.benchmark(group="pipeline")
def test_benchmark_render(benchmark, large_document):
    """Benchmark rendering of an already parsed document."""
    doc = parse(large_document)
    benchmark(render, doc)


@pytest.mark.benchmark(group="pipeline")
def test_benchmark_render_html(benchmark, large_document):
    """Benchmark the full conversion."""
    benchmark(render_html, large_document)


@pytest.mark.benchmark(group="real-world")
def test_benchmark_real_world(benchmark, real_world_docs):
    """Benchmark a batch of small documents through one Markdown instance."""
    md = Markdown()

    def convert_all():
        for doc in real_world_docs:
            md(doc)

    benchmark(convert_all)


@pytest.mark.benchmark(group="pathological")
@pytest.mark.parametrize(
    "name", ["open_brackets", "open_strong", "open_links_after_text", "many_digits"]
)
def test_benchmark_pathological(benchmark, pathological_documents, name):
    """Benchmark inputs where every delimiter degrades to text."""
    benchmark(render_html, pathological_documents[name])
