import os
import sys

import pytest

# Ensure the project root is importable when running tests from a checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def small_dictionary():
    return ("CAT", "ACT", "DOG", "TEA", "EAT", "ATE", "ZA", "DE", "QUIZ", "GO")
