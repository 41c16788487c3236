"""Benchmark scanning throughput.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

try:
    import pytest

    from catlexer import Scanner, tokenize

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_tokenize_large(benchmark, large_document):
        """Benchmark tokenize() over a large component template."""

        def scan():
            for _ in tokenize(large_document):
                pass

        benchmark(scan)

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_scanner_reuse(benchmark, large_document):
        """Benchmark one Scanner reset and drained per round."""
        scanner = Scanner()

        def scan():
            scanner.reset_source(large_document)
            while not scanner.next().is_terminal:
                pass

        benchmark(scan)

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_content_heavy(benchmark, content_heavy_document):
        """Benchmark long content spans (str.find fast path)."""

        def scan():
            for _ in tokenize(content_heavy_document):
                pass

        benchmark(scan)

except ImportError:
    pass  # pytest not available
