import logging

import pytest

from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import InvalidLength
from GolayCode.interface.golay import Golay
from GolayCode.interface.visualizer import TransmissionVisualizer
from GolayCode.simulation.config import SimulationConfig

from conftest import bits, flip


@pytest.fixture
def golay(config):
    return Golay(config, visualizer=TransmissionVisualizer(verbose=False))


def test_code_vector(golay):
    message = bits("101100111000")
    report = golay.code_vector(message)

    assert report.original == message
    assert report.encoded == golay.encoder.encode(message)
    assert report.received == report.transmitted
    assert report.error_positions == [
        i for i in range(23) if report.encoded[i] != report.transmitted[i]
    ]
    if len(report.error_positions) <= 3:
        assert report.decoded == message


def test_code_vector_with_override(golay):
    message = bits("000000000001")
    codeword = golay.encoder.encode(message)
    replacement = flip(codeword, 0, 10, 20)

    report = golay.code_vector(message, override=lambda noisy: replacement)

    assert report.received == replacement
    assert report.decoded == message
    assert report.result.corrected_bits == 3


def test_code_vector_override_declined(golay):
    report = golay.code_vector(bits("111111111111"), override=lambda noisy: None)
    assert report.received == report.transmitted


def test_code_vector_rejects_wrong_override_length(golay):
    with pytest.raises(InvalidLength):
        golay.code_vector(bits("111111111111"), override=lambda noisy: BitVector(12))


def test_code_vector_rejects_wrong_message_length(golay):
    with pytest.raises(InvalidLength):
        golay.code_vector(BitVector(8))


def test_code_string_noiseless(config):
    config = SimulationConfig.from_dict({**config.to_dict(), "error_probability": 0.0})
    golay = Golay(config, visualizer=TransmissionVisualizer(verbose=False))

    report = golay.code_string("Hello, Golay! ąę")

    assert report.without_coding == "Hello, Golay! ąę"
    assert report.with_coding == "Hello, Golay! ąę"


def test_code_string_low_noise(config):
    config = SimulationConfig.from_dict({**config.to_dict(), "error_probability": 0.01})
    golay = Golay(config, visualizer=TransmissionVisualizer(verbose=False))
    text = "The quick brown fox jumps over the lazy dog. " * 10

    report = golay.code_string(text)

    assert report.stats_with_coding.unit_errors <= report.stats_without_coding.unit_errors
    assert report.stats_with_coding.units == len(text)


def test_code_bmp_image(golay, config, tmp_path):
    pixels = bytes(range(256)) * 3
    source = tmp_path / "picture.bmp"
    source.write_bytes(b"BM" + bytes(52) + pixels)

    report = golay.code_bmp_image(str(source))

    without = (tmp_path / "image_without_coding.bmp").read_bytes()
    with_coding = (tmp_path / "image_with_coding.bmp").read_bytes()
    assert report.without_coding_path == str(tmp_path / "image_without_coding.bmp")
    assert report.with_coding_path == str(tmp_path / "image_with_coding.bmp")
    assert len(without) == len(with_coding) == 54 + len(pixels)
    assert without[:54] == with_coding[:54] == b"BM" + bytes(52)
    assert report.stats_with_coding.units == len(pixels)


def test_code_bmp_image_missing_file(golay, tmp_path):
    with pytest.raises(FileNotFoundError):
        golay.code_bmp_image(str(tmp_path / "missing.bmp"))


def test_visualizer_records_operations(config):
    visualizer = TransmissionVisualizer(verbose=False)
    golay = Golay(config, visualizer=visualizer)

    golay.code_vector(bits("010101010101"))
    golay.code_string("abc")

    assert [log.operation for log in visualizer.logs] == ["vector", "string"]


def test_log_level_applies_to_visualizer(config):
    golay = Golay(config)
    assert golay.visualizer.logger.logger.level == logging.WARNING
