"""
Unit Tests for Othello Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_rules.py

    # Run with coverage
    pytest tests/ --cov=othello_engine --cov-report=html

    # Run specific test
    pytest tests/test_rules.py::TestApplyMove::test_opening_move_flips_one_piece

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
