"""End-to-end conversion tests against real sound files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from speechwav.config import ConverterSettings
from speechwav.exceptions import EmptyFileError, FormatError, ReadError
from speechwav.janitor import TempFileJanitor
from speechwav.pipeline import TranscodingPipeline


def assert_target_profile(path: Path) -> None:
    """The file is a little-endian 16 kHz mono PCM_16 WAV."""
    info = sf.info(str(path))
    assert info.format == "WAV"
    assert info.subtype == "PCM_16"
    assert info.samplerate == 16000
    assert info.channels == 1
    header = path.read_bytes()[:12]
    assert header[:4] == b"RIFF"
    assert header[8:12] == b"WAVE"


class TestHappyPath:
    """Successful conversions across source formats."""

    def test_five_second_stereo_44k(self, settings: ConverterSettings, write_tone) -> None:
        source = write_tone("speech.wav", samplerate=44100, channels=2, duration=5.0)

        output = TranscodingPipeline(settings).convert(source)

        assert_target_profile(output)
        info = sf.info(str(output))
        assert info.frames == 80000
        assert info.duration == pytest.approx(5.0, abs=4096 / 44100)

    def test_tone_level_survives_conversion(self, settings: ConverterSettings, write_tone) -> None:
        source = write_tone(samplerate=44100, channels=2, duration=1.0, frequency=440.0, amplitude=0.5)

        data, _ = sf.read(str(TranscodingPipeline(settings).convert(source)), dtype="int16")

        steady = data[1000:-1000].astype(np.float64)
        assert np.max(np.abs(steady)) == pytest.approx(0.5 * 32767, rel=0.02)

    @pytest.mark.parametrize("samplerate,channels,subtype,frames", [
        (48000, 2, "PCM_24", 16000),
        (22050, 1, "FLOAT", 16000),
        (8000, 1, "PCM_16", 16000),
        (16000, 1, "PCM_16", 16000),
        (44100, 6, "PCM_16", 16000),
    ])
    def test_wav_sources(
        self, settings: ConverterSettings, write_tone, samplerate: int, channels: int, subtype: str, frames: int,
    ) -> None:
        source = write_tone(samplerate=samplerate, channels=channels, duration=1.0, subtype=subtype)

        output = TranscodingPipeline(settings).convert(source)

        assert_target_profile(output)
        assert sf.info(str(output)).frames == frames

    def test_flac_source(self, settings: ConverterSettings, write_tone) -> None:
        source = write_tone("speech.flac", samplerate=44100, channels=2, duration=1.0, format="FLAC")

        output = TranscodingPipeline(settings).convert(source)

        assert_target_profile(output)
        assert sf.info(str(output)).frames == 16000

    def test_silence_is_not_emptiness(self, settings: ConverterSettings, write_tone) -> None:
        source = write_tone(samplerate=44100, channels=2, duration=1.0, amplitude=0.0)

        data, rate = sf.read(str(TranscodingPipeline(settings).convert(source)), dtype="int16")

        assert rate == 16000
        assert len(data) == 16000
        assert not data.any()

    def test_truncated_source_converts_what_is_there(self, settings: ConverterSettings, write_tone) -> None:
        source = write_tone("cut.wav", samplerate=44100, channels=2, duration=1.0)
        raw = source.read_bytes()
        source.write_bytes(raw[: len(raw) // 2])

        frames = sf.info(str(TranscodingPipeline(settings).convert(source))).frames

        assert 0 < frames < 16000

    def test_single_frame_source(self, settings: ConverterSettings, write_tone) -> None:
        source = write_tone(samplerate=16000, channels=1, duration=1 / 16000)
        assert sf.info(str(TranscodingPipeline(settings).convert(source))).frames == 1


class TestChunkingEquivalence:
    """Output does not depend on the chunk size."""

    def test_chunk_sizes_give_equivalent_output(self, tmp_path: Path, write_tone) -> None:
        source = write_tone(samplerate=44100, channels=2, duration=2.0, frequency=1234.0)
        outputs = []
        for chunk_size in (1024, 4096, 16384):
            settings = ConverterSettings(output_dir=tmp_path / f"chunk-{chunk_size}", chunk_size=chunk_size)
            data, _ = sf.read(str(TranscodingPipeline(settings).convert(source)), dtype="int16")
            outputs.append(data.astype(np.int32))

        assert [len(data) for data in outputs] == [32000, 32000, 32000]
        assert np.max(np.abs(outputs[0] - outputs[1])) <= 1
        assert np.max(np.abs(outputs[1] - outputs[2])) <= 1


class TestFailures:
    """Failure scenarios leave nothing behind."""

    def test_zero_length_input(self, settings: ConverterSettings, write_tone, output_files) -> None:
        source = write_tone(samplerate=44100, channels=2, duration=0.0)
        assert sf.info(str(source)).frames == 0

        with pytest.raises(EmptyFileError):
            TranscodingPipeline(settings).convert(source)

        assert output_files() == []

    def test_nonexistent_path(self, settings: ConverterSettings, tmp_path: Path, output_files) -> None:
        with pytest.raises(ReadError):
            TranscodingPipeline(settings).convert(tmp_path / "does-not-exist.wav")
        assert output_files() == []

    @pytest.mark.skipif(not sf.check_format("WAV", "IMA_ADPCM"), reason="libsndfile lacks IMA ADPCM")
    def test_unsupported_source_encoding(self, settings: ConverterSettings, write_tone, output_files) -> None:
        source = write_tone(samplerate=8000, channels=1, duration=0.5, subtype="IMA_ADPCM")

        with pytest.raises(FormatError):
            TranscodingPipeline(settings).convert(source)

        assert output_files() == []


class TestJanitorAfterConversions:
    """The janitor removes converted files and nothing else."""

    def test_cleanup_after_conversions(self, settings: ConverterSettings, write_tone, output_files) -> None:
        pipeline = TranscodingPipeline(settings)
        source = write_tone(duration=0.1)
        converted = {pipeline.convert(source) for _ in range(3)}
        unrelated = settings.output_dir / "upload-receipt.json"
        unrelated.write_text("{}")

        janitor = TempFileJanitor.from_settings(settings)
        first = janitor.cleanup()
        second = janitor.cleanup()

        assert set(first.removed) == converted
        assert second.removed == [] and second.failed == []
        assert output_files() == [unrelated]
