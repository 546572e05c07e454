"""
Tests for the synthetic sample generator.
"""

from quantstream.data.sample_data import generate_samples, samples_from_values


def test_generate_samples_length_and_timestamps():
    samples = generate_samples(n=50)
    assert len(samples) == 50
    assert [s.timestamp for s in samples] == [float(i) for i in range(50)]


def test_generate_samples_deterministic_with_seed():
    assert generate_samples(n=20, seed=5) == generate_samples(n=20, seed=5)
    assert generate_samples(n=20, seed=5) != generate_samples(n=20, seed=6)


def test_generate_samples_positive_values():
    samples = generate_samples(n=500, volatility=0.05, seed=9)
    assert all(s.value > 0 for s in samples)


def test_samples_from_values():
    samples = samples_from_values([1.0, 2.0, 3.0], start=10.0, step=0.5)
    assert [s.timestamp for s in samples] == [10.0, 10.5, 11.0]
    assert [s.value for s in samples] == [1.0, 2.0, 3.0]
