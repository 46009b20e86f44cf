# cipherdesk/cli.py
from typing import List, Optional

import typer
from loguru import logger

from .services.logging import setup_logging
from .config.loader import get_config
from .core.alphabet import format_alphabet, resolve_alphabet
from .core.cipher_engine import compute_result
from .core.models import Action, Algorithm, CipherSettings
from . import __version__

app = typer.Typer(help="CipherDesk CLI - Caesar and Atbash ciphers over any alphabet.")

def version_callback(value: bool):
    if value:
        print(f"CipherDesk CLI Version: {__version__}")
        raise typer.Exit()

@app.callback()
def main_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."),
):
    """ Main callback to set up logging """
    config = get_config()
    setup_logging(level=config.log_level, verbose=verbose, retention=config.log_retention)
    ctx.ensure_object(dict)
    ctx.obj["VERBOSE"] = verbose


# Shared options
_ALPHABET_OPTION = typer.Option(None, "--alphabet", "-a", help="Custom alphabet as one string, each character is a letter (e.g. 'ABC').")
_LETTER_OPTION = typer.Option(None, "--letter", "-l", help="Custom alphabet letter, repeat for more. Entries longer than one character are ignored.")


def _read_message(message: str) -> str:
    if message == "-":
        return typer.get_text_stream("stdin").read().removesuffix("\n") # Only the final line terminator
    return message

def _custom_slots(alphabet: Optional[str], letters: Optional[List[str]]) -> List[str]:
    """Letters from the command line, or the configured default alphabet when none are given."""
    slots: List[str] = list(alphabet) if alphabet else []
    if letters:
        slots.extend(letters)
    if not slots:
        slots = list(get_config().default_custom_alphabet)
    return slots

def _run_cipher(algorithm: Algorithm, action: Action, shift: Optional[int], message: str,
                alphabet: Optional[str], letters: Optional[List[str]]) -> None:
    config = get_config()
    slots = _custom_slots(alphabet, letters)

    try:
        settings = CipherSettings(
            algorithm=algorithm,
            action=action,
            shift=config.default_shift if shift is None else shift,
            use_custom_alphabet=bool(slots),
            custom_slots=slots,
            message=_read_message(message),
        )
        result = compute_result(settings)
    except ValueError as e:
        logger.error(f"Cipher Error: {e}")
        raise typer.Exit(code=1)

    logger.debug(f"Active alphabet: {format_alphabet(result.alphabet, '')}")
    typer.echo(result.output)


@app.command()
def run(
    message: str = typer.Argument(..., help="Text to transform, or '-' to read from stdin."),
    algorithm: Algorithm = typer.Option(Algorithm.CAESAR, "--algorithm", "-A", case_sensitive=False, help="Cipher algorithm."),
    action: Action = typer.Option(Action.ENCRYPT, "--action", "-x", case_sensitive=False, help="Encrypt or decrypt (ignored by Atbash)."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s", help="Caesar shift, may be negative. Defaults to the configured shift (3)."),
    alphabet: Optional[str] = _ALPHABET_OPTION,
    letter: Optional[List[str]] = _LETTER_OPTION,
):
    """
    Transforms a message with the chosen algorithm and action.
    """
    _run_cipher(algorithm, action, shift, message, alphabet, letter)

@app.command()
def encrypt(
    message: str = typer.Argument(..., help="Text to encrypt, or '-' to read from stdin."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s", help="Caesar shift."),
    alphabet: Optional[str] = _ALPHABET_OPTION,
    letter: Optional[List[str]] = _LETTER_OPTION,
):
    """Caesar-encrypts a message."""
    _run_cipher(Algorithm.CAESAR, Action.ENCRYPT, shift, message, alphabet, letter)

@app.command()
def decrypt(
    message: str = typer.Argument(..., help="Text to decrypt, or '-' to read from stdin."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s", help="Caesar shift."),
    alphabet: Optional[str] = _ALPHABET_OPTION,
    letter: Optional[List[str]] = _LETTER_OPTION,
):
    """Caesar-decrypts a message."""
    _run_cipher(Algorithm.CAESAR, Action.DECRYPT, shift, message, alphabet, letter)

@app.command()
def atbash(
    message: str = typer.Argument(..., help="Text to mirror, or '-' to read from stdin."),
    alphabet: Optional[str] = _ALPHABET_OPTION,
    letter: Optional[List[str]] = _LETTER_OPTION,
):
    """Applies Atbash (its own inverse, so it both encrypts and decrypts)."""
    _run_cipher(Algorithm.ATBASH, Action.ENCRYPT, None, message, alphabet, letter)

@app.command(name="alphabet")
def show_alphabet(
    alphabet: Optional[str] = _ALPHABET_OPTION,
    letter: Optional[List[str]] = _LETTER_OPTION,
):
    """Prints the alphabet that would be used for the given letters."""
    slots = _custom_slots(alphabet, letter)
    resolved = resolve_alphabet(bool(slots), slots)
    if slots and not any(len(slot) == 1 for slot in slots):
        logger.info("No usable custom letters given, showing the default alphabet.")
    typer.echo(format_alphabet(resolved))


if __name__ == "__main__":
    app()
