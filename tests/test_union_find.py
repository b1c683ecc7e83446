import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from prisonersim.union_find import DisjointSet


def test_init_singletons():
    ds = DisjointSet(5)
    assert len(ds) == 5
    np.testing.assert_array_equal(ds.parent, np.arange(5))
    np.testing.assert_array_equal(ds.size, np.ones(5))
    assert all(ds.find(i) == i for i in range(5))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_union_is_directed():
    ds = DisjointSet(4)
    assert ds.union(3, 1)
    assert ds.parent[3] == 1
    assert ds.find(3) == 1
    assert ds.component_size(3) == 2
    assert ds.component_size(1) == 2


def test_chained_unions_accumulate_at_true_root():
    ds = DisjointSet(6)
    ds.union(5, 2)
    ds.union(4, 2)
    ds.union(2, 0)
    assert ds.find(5) == 0
    assert ds.component_size(5) == 4
    assert ds.size[0] == 4
    # no path compression: 5 still points at its original parent
    assert ds.parent[5] == 2


def test_union_within_same_partition_is_noop():
    ds = DisjointSet(3)
    ds.union(2, 1)
    assert not ds.union(2, 1)
    assert not ds.union(1, 1)
    assert ds.component_size(1) == 2
