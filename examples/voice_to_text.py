#!/usr/bin/env python3
"""
Speech-to-text example.

Transcribes an audio file, then translates it to English.

Usage:
    export OPENAI_API_KEY="your-api-key"
    python examples/voice_to_text.py speech.mp3
"""

import asyncio
import sys

from openai_lite import (
    APIError,
    AudioModel,
    AudioParams,
    AudioResponseFormat,
    Client,
    RequestError,
)
from openai_lite.telemetry import LibLogger, LogLevel


async def main(path: str) -> None:
    """Run speech-to-text example."""
    # Print request/response lines to stderr
    LibLogger.configure(LogLevel.DEBUG, format="text")

    async with Client.from_env() as client:
        try:
            transcript = await client.create_transcription(
                AudioParams(file_path=path, model=AudioModel.WHISPER_1)
            )
            print(f"Transcript: {transcript.text}")

            subtitles = await client.create_transcription(
                AudioParams(
                    file_path=path,
                    model=AudioModel.WHISPER_1,
                    response_format=AudioResponseFormat.SRT,
                )
            )
            print(f"Subtitles:\n{subtitles.text}")

            translation = await client.create_translation(
                AudioParams(file_path=path, model=AudioModel.WHISPER_1, temperature=0.2)
            )
            print(f"English: {translation.text}")

        except APIError as e:
            print(f"API error ({e.status_code}, {e.type}): {e.message}")
        except RequestError as e:
            print(f"Request failed with status {e.status_code}: {e.cause}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: voice_to_text.py <audio-file>")
    asyncio.run(main(sys.argv[1]))
