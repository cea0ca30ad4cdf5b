"""
Tests for the sample shipment series generator.
"""

import math

import pytest

from shipment_forecasting.forecasting.exceptions import InvalidParameterError
from shipment_forecasting.forecasting.sample import generate_sample_shipment_data


def test_length():
    assert len(generate_sample_shipment_data(36)) == 36
    assert generate_sample_shipment_data(0) == []


def test_seeded_output_is_reproducible():
    assert generate_sample_shipment_data(12, random_state=7) == generate_sample_shipment_data(12, random_state=7)


def test_noise_stays_within_half_width():
    data = generate_sample_shipment_data(48, noise=500)
    for i, value in enumerate(data):
        expected = 10000 + 50 * i + 2000 * math.sin(2 * math.pi * i / 12)
        assert abs(value - expected) <= 250


def test_zero_noise_is_deterministic_shape():
    data = generate_sample_shipment_data(3, base_volume=100, trend=10, seasonality=0, noise=0)
    assert data == pytest.approx([100, 110, 120])


def test_negative_months_rejected():
    with pytest.raises(InvalidParameterError):
        generate_sample_shipment_data(-1)
