"""Tests for keyframe data structures."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from nao_pos.core import KeyFrame, ParseResult, SparseJointVector


def test_sparse_vector_from_pairs():
    vector = SparseJointVector.from_pairs([(0, 0.5), (3, -1.0)])

    assert vector.indexes == (0, 3)
    assert len(vector) == 2
    assert vector.values.dtype == jnp.float64
    assert vector.pairs() == [(0, 0.5), (3, -1.0)]


def test_sparse_vector_empty():
    vector = SparseJointVector.empty()

    assert len(vector) == 0
    assert vector.values.shape == (0,)
    assert vector.pairs() == []


def test_sparse_vector_rejects_unordered_indexes():
    with pytest.raises(ValueError):
        SparseJointVector.from_pairs([(2, 0.0), (1, 0.0)])
    with pytest.raises(ValueError):
        SparseJointVector.from_pairs([(1, 0.0), (1, 0.0)])


def test_sparse_vector_to_dense():
    vector = SparseJointVector.from_pairs([(1, 0.25), (3, 0.75)])

    dense = vector.to_dense(5)
    np.testing.assert_allclose(dense, jnp.array([0.0, 0.25, 0.0, 0.75, 0.0]))

    dense = SparseJointVector.empty().to_dense(3, fill=1.0)
    np.testing.assert_allclose(dense, jnp.ones(3))


def test_sparse_vector_to_dense_rejects_out_of_range():
    vector = SparseJointVector.from_pairs([(0, 0.1), (4, 0.2)])

    with pytest.raises(ValueError):
        vector.to_dense(4)
    with pytest.raises(ValueError):
        SparseJointVector.from_pairs([(-1, 0.1)]).to_dense(4)
    assert vector.to_dense(5).shape == (5,)


def test_keyframe_is_pytree():
    """Test that KeyFrame is a valid JAX PyTree."""
    keyframe = KeyFrame(
        time=100,
        positions=SparseJointVector.from_pairs([(0, 0.1), (1, 0.2)]),
        stiffnesses=SparseJointVector.from_pairs([(0, 1.0), (1, 1.0)]),
    )

    flat, tree_def = jax.tree_util.tree_flatten(keyframe)
    assert len(flat) == 2

    reconstructed = jax.tree_util.tree_unflatten(tree_def, flat)
    assert reconstructed.time == keyframe.time
    assert reconstructed.positions.indexes == keyframe.positions.indexes
    np.testing.assert_array_equal(reconstructed.positions.values, keyframe.positions.values)
    np.testing.assert_array_equal(reconstructed.stiffnesses.values, keyframe.stiffnesses.values)


def test_keyframe_jit_compatibility():
    """Test that KeyFrame can be used in JIT-compiled functions."""
    keyframe = KeyFrame(
        time=50,
        positions=SparseJointVector.from_pairs([(0, 0.5), (2, -0.5)]),
        stiffnesses=SparseJointVector.from_pairs([(0, 0.8), (2, 0.6)]),
    )

    @jax.jit
    def weighted_targets(frame):
        return frame.positions.values * frame.stiffnesses.values

    np.testing.assert_allclose(weighted_targets(keyframe), jnp.array([0.4, -0.3]))


def test_keyframe_is_immutable():
    keyframe = KeyFrame(
        time=10,
        positions=SparseJointVector.empty(),
        stiffnesses=SparseJointVector.empty(),
    )
    with pytest.raises(AttributeError):
        keyframe.time = 20


def test_parse_result_defaults():
    result = ParseResult(successful=True)
    assert result.keyframes == ()
    assert result.error is None
