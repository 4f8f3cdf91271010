import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to sys.path so we can import qbank_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


FIXED_TIME = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


# Common test fixtures
@pytest.fixture
def fixed_clock():
    """Return a clock that always reports FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def question_bank_text():
    """Question bank as decoded page text: title block, table header, rows."""
    return """
SRI KRISHNA INSTITUTE OF TECHNOLOGY
Department of Artificial Intelligence and Machine Learning
Subject Name: Analysis and Design of Algorithms Subject Code: BCS401
SEM: 4th DIV: A
Faculty: Prof. Manzoor Ahmed
Module-1 Question Bank

SL# Question CO Level Marks

1. Define algorithm. Explain asymptotic notations Big Oh, Big Omega and Big Theta notations. CO1 L2 08

2. Explain the general plan for analyzing the efficiency of recursive algorithm. CO1 L2 08

3. Design the algorithm to find the efficiency of bubble sort. CO3 L3 10

4. What is an algorithm? Explain the fundamentals of algorithmic problem solving. CO1 L1 04
"""


@pytest.fixture
def run_together_text():
    """Question bank whose decoder joined every page into one line."""
    return (
        "SRI KRISHNA INSTITUTE OF TECHNOLOGY Department of Artificial Intelligence "
        "Module-1 Question Bank SL# Question CO Level Marks "
        "1. Define algorithm and explain asymptotic notations. CO1 L2 08 "
        "2. Explain the general plan for analyzing recursive algorithms. CO1 L2 08 "
        "3. Design the algorithm to find the efficiency of bubble sort. CO3 L3 10"
    )
