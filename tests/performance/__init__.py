"""
Performance Tests.

Benchmarks for the record pipeline:
    - 1000 records < 1 second
    - 10000 records < 5 seconds
    - Execution time per stage
"""
