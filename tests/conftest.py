import pytest

from golf_scoring import Hole


@pytest.fixture
def course_holes():
    # stroke index per hole on a typical parkland layout
    ranks = [7, 15, 1, 11, 3, 17, 9, 13, 5, 8, 16, 2, 12, 4, 18, 10, 14, 6]
    pars = [4, 3, 5, 4, 4, 3, 4, 4, 5, 4, 3, 5, 4, 4, 3, 4, 4, 5]
    return [
        Hole(number=n, stroke_index=rank, par=par)
        for n, (rank, par) in enumerate(zip(ranks, pars), start=1)
    ]
