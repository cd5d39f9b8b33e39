"""
Test suite for auction payment generation

Contains:
- tests/unit/          : Unit tests for domain models, evaluator, calendar, contracts and generator
"""
