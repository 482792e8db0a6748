"""
Unit Tests for Migration Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=migration_engine --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestMinimax::test_stuck_minimizer_scores_sentinel

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
