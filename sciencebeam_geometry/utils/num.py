from typing import Sequence

import numpy as np

from sciencebeam_geometry.utils.drectangle import DRectangle


def assert_close(a, b, atol=1.e-8):
    try:
        assert np.allclose([a], [b], atol=atol)
    except AssertionError as e:
        raise AssertionError('expected %s to be close to %s (atol=%s)' % (a, b, atol)) from e


def assert_all_close(a: Sequence[float], b: Sequence[float], atol=1.e-8):
    try:
        assert np.allclose(a, b, atol=atol)
    except AssertionError as e:
        raise AssertionError('expected %s to be close to %s (atol=%s)' % (a, b, atol)) from e


def assert_drectangle_close(a: DRectangle, b: DRectangle, atol=1.e-8):
    assert_all_close(a.to_list(), b.to_list(), atol=atol)
