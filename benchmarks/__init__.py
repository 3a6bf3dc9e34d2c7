"""Performance benchmarks for graphtrace.

This package contains microbenchmarks that time each algorithm end to end
through the dispatcher on random connected graphs.
"""
