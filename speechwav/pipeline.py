"""Transcoding pipeline for Speech WAV.

Converts any file libsndfile can read into a 16 kHz mono PCM_16 WAV file,
streaming the source through fixed-size buffers so memory use does not grow
with the input length.
"""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

import soundfile as sf
from tqdm import tqdm

from speechwav.audio.info import AudioInfoRetriever
from speechwav.config import ConverterSettings
from speechwav.exceptions import (
    AudioConversionError,
    ConversionFailedError,
    EmptyFileError,
    FormatError,
    ReadError,
    WriteError,
)
from speechwav.formats import TARGET_FORMAT, SourceFormat, TargetFormat, realize_target_format
from speechwav.output.naming import build_output_path
from speechwav.processing.buffers import InputBuffer, OutputBuffer, output_capacity
from speechwav.processing.converters import Converter, ConverterStatus, create_converter

logger = logging.getLogger(__name__)

ConverterFactory = Callable[[SourceFormat, TargetFormat], Converter | None]


class TranscodingPipeline:
    """Convert source audio files to the fixed target profile.

    The pipeline holds only immutable settings. Every call to :meth:`convert`
    owns its own source handle, converter and buffers, so one instance can
    serve concurrent conversions of different files.
    """

    def __init__(
        self,
        settings: ConverterSettings | None = None,
        *,
        target: TargetFormat = TARGET_FORMAT,
        converter_factory: ConverterFactory = create_converter,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Output directory, chunk size and naming (defaults if None)
            target: Target profile to write
            converter_factory: Binds a converter to a source/target pair, returning
                None when the pair is incompatible
        """
        self.settings = settings or ConverterSettings()
        self.target = target
        self._converter_factory = converter_factory
        self._info_retriever = AudioInfoRetriever()

    @property
    def output_dir(self) -> Path:
        return self.settings.output_dir

    def convert(self, source_path: Path | str) -> Path:
        """Convert ``source_path`` and return the path of the new WAV file.

        The caller owns the returned file. On failure any partially written
        output is removed before the error is raised.

        Args:
            source_path: Audio file to convert

        Returns:
            Path of the converted file inside the output directory

        Raises:
            ReadError: The source cannot be opened or read
            WriteError: The output cannot be created, written or re-opened
            FormatError: The target or the converter cannot be set up
            ConversionFailedError: The converter failed, or any other failure
            EmptyFileError: The finished output has no frames
        """
        source_path = Path(source_path)
        output_path = self._prepare_output_path()
        logger.debug("Converting %s -> %s", source_path, output_path)

        try:
            self._transcode(source_path, output_path)
            frames = self._verify_output(output_path)
        except Exception as e:
            self._discard_output(output_path)
            error = e if isinstance(e, AudioConversionError) else ConversionFailedError(e)
            logger.error("Conversion of %s failed: %s", source_path, error)
            if error is e:
                raise
            raise error from e

        logger.info(
            "Converted %s to %s (%d frames, %.2fs)",
            source_path, output_path, frames, frames / self.target.sample_rate,
        )
        return output_path

    async def convert_async(self, source_path: Path | str) -> Path:
        """Run :meth:`convert` in a worker thread and await its result.

        There is no cancellation: a caller that gives up (for example through
        ``asyncio.wait_for``) leaves the conversion running to completion, and
        its output is left for the janitor.
        """
        return await asyncio.to_thread(self.convert, source_path)

    def _prepare_output_path(self) -> Path:
        """Create the output directory and return a fresh, unoccupied path."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path = build_output_path(
                self.output_dir, self.settings.file_prefix, self.settings.extension
            )
            if output_path.exists():
                logger.warning("Removing existing file at generated path %s", output_path)
                output_path.unlink()
        except OSError as e:
            raise WriteError(f"Cannot prepare output in {self.output_dir}: {e}") from e
        return output_path

    def _transcode(self, source_path: Path, output_path: Path) -> None:
        with self._open_source(source_path) as source:
            source_format = SourceFormat.from_soundfile(source)
            logger.debug(
                "Source format: %s/%s, %d ch @ %d Hz, %d frames",
                source_format.format, source_format.subtype, source_format.channels,
                source_format.samplerate, source_format.frames,
            )

            target = realize_target_format(self.target)
            converter = self._bind_converter(source_format, target)

            with self._open_output(output_path, target) as output:
                input_buffer, output_buffer = self._allocate_buffers(source_format, target)
                self._pump(source, source_format, converter, input_buffer, output_buffer, output)
                self._drain(converter, output_buffer, output)

    def _open_source(self, source_path: Path) -> sf.SoundFile:
        try:
            return sf.SoundFile(str(source_path))
        except (RuntimeError, OSError, TypeError) as e:
            raise ReadError(f"Cannot open {source_path} as audio: {e}") from e

    def _bind_converter(self, source_format: SourceFormat, target: TargetFormat) -> Converter:
        try:
            converter = self._converter_factory(source_format, target)
        except ValueError as e:
            raise FormatError(f"Cannot create converter: {e}") from e
        if converter is None:
            raise FormatError(
                f"No converter from {source_format.subtype} "
                f"({source_format.channels} ch @ {source_format.samplerate} Hz) "
                f"to {target.soundfile_subtype} ({target.channels} ch @ {target.sample_rate} Hz)"
            )
        return converter

    def _open_output(self, output_path: Path, target: TargetFormat) -> sf.SoundFile:
        try:
            return sf.SoundFile(
                str(output_path), "w",
                samplerate=target.sample_rate,
                channels=target.channels,
                subtype=target.soundfile_subtype,
                endian=target.soundfile_endian,
                format=target.soundfile_format,
            )
        except (RuntimeError, OSError, TypeError, ValueError) as e:
            raise WriteError(f"Cannot create {output_path}: {e}") from e

    def _allocate_buffers(
        self, source_format: SourceFormat, target: TargetFormat
    ) -> tuple[InputBuffer, OutputBuffer]:
        """Allocate both buffers once; they are reset, never reallocated, per chunk."""
        chunk_size = self.settings.chunk_size
        try:
            capacity = output_capacity(chunk_size, source_format.samplerate, target.sample_rate)
            input_buffer = InputBuffer(chunk_size, source_format.channels)
            output_buffer = OutputBuffer(capacity, target.channels)
        except ValueError as e:
            raise FormatError(f"Cannot allocate conversion buffers: {e}") from e
        logger.debug("Buffers: %d input frames, %d output frames", chunk_size, capacity)
        return input_buffer, output_buffer

    def _pump(
        self,
        source: sf.SoundFile,
        source_format: SourceFormat,
        converter: Converter,
        input_buffer: InputBuffer,
        output_buffer: OutputBuffer,
        output: sf.SoundFile,
    ) -> None:
        """Read, convert and write chunk by chunk until the source is exhausted."""
        total = source_format.frames
        with tqdm(
            total=total, desc="Converting", unit="frame",
            disable=not self.settings.show_progress,
        ) as progress:
            while source.tell() < total:
                try:
                    read = input_buffer.fill_from(source)
                except (RuntimeError, OSError, ValueError) as e:
                    raise ReadError(f"Failed reading source at frame {source.tell()}: {e}") from e
                if read == 0:
                    logger.warning(
                        "Source ended at frame %d of %d reported frames", source.tell(), total
                    )
                    break

                try:
                    status = converter.convert(input_buffer, output_buffer)
                except Exception as e:
                    raise ConversionFailedError(e) from e
                self._check_status(converter, status)

                self._write(output, output_buffer)
                logger.debug("Chunk: %d frames in, %d frames out (%s)",
                             read, output_buffer.frame_length, status.name)

                input_buffer.reset()
                output_buffer.reset()
                progress.update(read)

    def _drain(self, converter: Converter, output_buffer: OutputBuffer, output: sf.SoundFile) -> None:
        """Flush the converter's remaining frames into the output."""
        while True:
            try:
                status = converter.flush(output_buffer)
            except Exception as e:
                raise ConversionFailedError(e) from e
            self._check_status(converter, status)
            self._write(output, output_buffer)
            output_buffer.reset()
            if status is ConverterStatus.END_OF_STREAM:
                return

    @staticmethod
    def _check_status(converter: Converter, status: ConverterStatus) -> None:
        if status is ConverterStatus.ERROR:
            detail = converter.last_error or "converter reported an error status"
            raise ConversionFailedError(RuntimeError(detail))

    def _write(self, output: sf.SoundFile, output_buffer: OutputBuffer) -> None:
        if output_buffer.frame_length == 0:
            return
        try:
            output.write(output_buffer.frames)
        except (RuntimeError, OSError, ValueError) as e:
            raise WriteError(f"Failed writing {output.name}: {e}") from e

    def _verify_output(self, output_path: Path) -> int:
        """Re-open the finished file and return its frame count."""
        try:
            info = self._info_retriever.get_info(output_path)
        except ReadError as e:
            raise WriteError(f"Converted file {output_path} cannot be re-opened: {e}") from e
        logger.debug(
            "Verified output: %d ch @ %d Hz, %s, %d frames",
            info.channels, info.samplerate, info.subtype, info.frames,
        )
        if info.frames == 0:
            raise EmptyFileError(f"Converted file {output_path} has no frames")
        return info.frames

    def _discard_output(self, output_path: Path) -> None:
        """Best-effort removal of a partial output file."""
        try:
            output_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove partial output %s: %s", output_path, e)


def convert_to_target_format(
    source_path: Path | str, settings: ConverterSettings | None = None
) -> Path:
    """Convert one file with a default-configured pipeline.

    See :meth:`TranscodingPipeline.convert`.
    """
    return TranscodingPipeline(settings).convert(source_path)
