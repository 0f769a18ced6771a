import pytest

from lifestyle.scoring import MomentumStatus, get_momentum_status, get_progress_fill, completion_percentage


@pytest.mark.parametrize("score,status,label", [
    (-100, MomentumStatus.STRUGGLING, "Struggling"),
    (-50, MomentumStatus.STRUGGLING, "Struggling"),
    (-49, MomentumStatus.STRUGGLING, "Falling Behind"),
    (-11, MomentumStatus.STRUGGLING, "Falling Behind"),
    (-10, MomentumStatus.MAINTAINING, "Maintaining"),
    (0, MomentumStatus.MAINTAINING, "Maintaining"),
    (10, MomentumStatus.MAINTAINING, "Maintaining"),
    (11, MomentumStatus.EXCELLING, "Progressing"),
    (50, MomentumStatus.EXCELLING, "Progressing"),
    (51, MomentumStatus.EXCELLING, "Excelling"),
    (100, MomentumStatus.EXCELLING, "Excelling"),
])
def test_status_bands(score, status, label):
    assert get_momentum_status(score) == (status, label)


def test_status_serializes_as_plain_string():
    assert MomentumStatus.EXCELLING == "excelling"


@pytest.mark.parametrize("score,fill", [(-100, 0), (-40, 30), (0, 50), (37, 68.5), (100, 100)])
def test_progress_fill(score, fill):
    assert get_progress_fill(score) == fill


def test_completion_percentage():
    assert completion_percentage(0, 0) == 0
    assert completion_percentage(1, 3) == 33
    assert completion_percentage(2, 3) == 67
    assert completion_percentage(1, 8) == 13
