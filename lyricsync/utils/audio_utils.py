import logging
import time
import warnings

import librosa
import soundfile as sf

from lyricsync.config import AudioReadConfig, get_settings
from lyricsync.utils.logger import get_logger


logger: logging.Logger = get_logger(__name__)


def get_audio_duration(
    file_path: str, read_config: AudioReadConfig | None = None
) -> float:
    """
    Reads the duration of an audio track.

    Arguments:
        file_path (str): Path to the audio file.
        read_config (AudioReadConfig, optional): Retry settings, by default
            taken from the application settings.

    Returns:
        float: Duration in seconds.
    """
    config: AudioReadConfig = (
        read_config if read_config is not None else get_settings().audio_read
    )
    logger.debug(msg=f"Reading audio duration: {file_path}")
    for attempt in range(config.max_retries):
        logger.debug(
            msg=f"Attempt {attempt + 1} to read audio duration using librosa."
        )
        try:
            with warnings.catch_warnings():
                warnings.filterwarnings("ignore")
                duration = float(librosa.get_duration(path=file_path))
            logger.debug(
                msg=f"Audio duration of {file_path} is {duration:.3f}s (librosa)"
            )
            return duration

        except Exception as e:
            logger.warning(msg=f"Librosa failed to read audio file: {e}")
            logger.warning(msg="Falling back to soundfile...")
            try:
                info = sf.info(file_path)
                duration = float(info.duration)
                logger.debug(
                    msg=f"Audio duration of {file_path} is {duration:.3f}s (soundfile)"
                )
                return duration

            except Exception as err:
                logger.warning(msg=f"Soundfile also failed: {err}")
                if attempt + 1 < config.max_retries:
                    logger.info(
                        msg=f"Retrying with librosa in {config.retry_delay} seconds..."
                    )
                    time.sleep(config.retry_delay)

    logger.error(
        msg=(
            f"Failed to read audio file {file_path} "
            f"after {config.max_retries} retries."
        )
    )
    raise OSError(f"Error reading {file_path}")
