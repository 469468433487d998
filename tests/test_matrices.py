import numpy as np
import pytest

from GolayCode.core.matrices import B, IDENTITY, build_matrices, gf2_multiply


def test_shapes(matrices):
    assert matrices.generator.shape == (12, 23)
    assert matrices.parity_check.shape == (24, 12)
    assert matrices.b.shape == (12, 12)


def test_generator_is_identity_then_b(matrices):
    np.testing.assert_array_equal(matrices.generator[:, :12], IDENTITY)
    np.testing.assert_array_equal(matrices.generator[:, 12:], B[:, :11])


def test_parity_check_stacks_identity_over_b(matrices):
    np.testing.assert_array_equal(matrices.parity_check[:12], IDENTITY)
    np.testing.assert_array_equal(matrices.parity_check[12:], B)


def test_b_is_symmetric_and_self_inverse():
    np.testing.assert_array_equal(B, B.T)
    np.testing.assert_array_equal(np.dot(B.astype(int), B) % 2, IDENTITY)


def test_extended_code_is_self_orthogonal(matrices):
    extended_generator = np.hstack([IDENTITY, B])
    product = np.dot(extended_generator.astype(int), matrices.parity_check) % 2
    assert not product.any()


def test_built_once(matrices):
    again = build_matrices()
    assert again.generator is matrices.generator
    assert again.parity_check is matrices.parity_check


def test_matrices_are_read_only(matrices):
    with pytest.raises(ValueError):
        matrices.generator[0, 0] = 0
    with pytest.raises(ValueError):
        B[0, 0] = 0


def test_gf2_multiply():
    matrix = np.array([[1, 1], [0, 1], [1, 1]], dtype=np.uint8)
    result = gf2_multiply(np.array([True, True, True]), matrix)
    assert result.tolist() == [False, True]
