from pathlib import Path

from snapextract.transcription.exceptions import TranscriptionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the default transcription instructions from a file.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled transcription_prompt.txt.

    Returns:
        The instruction text with surrounding whitespace removed.

    Raises:
        TranscriptionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "transcription_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise TranscriptionError(f"Failed to load prompt template: {exc}") from exc
