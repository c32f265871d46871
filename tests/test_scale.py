"""Storage serialisation of scorer scales."""

import pytest

from errors import ScaleTypeMismatch
from models.scale import dump_scale


@pytest.mark.parametrize("value", [[1, 2, 3], [0.5, 1.0], ['1', '2'], [], (1, 2)])
def test_flat_scales_are_stored(value) -> None:
    assert dump_scale(value) == list(value)


@pytest.mark.parametrize(
    "value",
    [
        {'1': 'bad', '2': 'good'},
        '1,2,3',
        3,
        [[1, 2], [3]],
        [{'level': 1}],
        [True, False],
    ],
)
def test_other_shapes_are_rejected(value) -> None:
    with pytest.raises(ScaleTypeMismatch):
        dump_scale(value)
